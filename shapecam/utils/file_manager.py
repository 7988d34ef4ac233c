"""Program file export utilities."""
import os

from .gcode_format import sanitize_program_name

PROGRAM_EXTENSION = ".gcode"
DEFAULT_PROGRAM_FILENAME = "toolpath" + PROGRAM_EXTENSION


def build_program_filename(name: str = "") -> str:
    """
    Build a download/output filename for a program.

    Args:
        name: Base name (extension optional); sanitized for filesystem use

    Returns:
        Filename ending in .gcode, DEFAULT_PROGRAM_FILENAME if name is empty
    """
    base = sanitize_program_name((name or "").strip())
    if base.lower().endswith(PROGRAM_EXTENSION):
        base = base[:-len(PROGRAM_EXTENSION)]
    base = base.strip('.')
    if not base:
        return DEFAULT_PROGRAM_FILENAME
    return base + PROGRAM_EXTENSION


def program_bytes(content: str) -> bytes:
    """Encode program text for download (UTF-8, no compression)."""
    return content.encode('utf-8')


def write_program_file(directory: str, content: str, filename: str = DEFAULT_PROGRAM_FILENAME) -> str:
    """
    Write a program file, creating the directory if needed.

    Args:
        directory: Output directory
        content: Program text
        filename: File name

    Returns:
        Full path to the written file
    """
    os.makedirs(directory, exist_ok=True)
    file_path = os.path.join(directory, filename)
    with open(file_path, 'w', newline='\n') as f:
        f.write(content)
    return file_path
