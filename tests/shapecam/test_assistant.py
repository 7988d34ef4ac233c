"""Tests for shapecam/assistant.py module."""
import pytest

from shapecam.assistant import (
    EXPLAIN_FALLBACK,
    EXPLAIN_MAX_CHARS,
    annotate_program,
    explain_program,
    format_annotation,
    request_scene,
)
from shapecam.errors import ExplainFailure, GenerationFailure
from shapecam.models import Circle, Scene


class TestRequestScene:
    """Tests for shape generator results and failures."""

    def test_accepts_shape_dicts(self, sample_scene):
        def generator(prompt, scene):
            return [{'id': 'a', 'type': 'rectangle', 'x': 0, 'y': 0, 'width': 5, 'height': 5}]

        result = request_scene(generator, 'a square', sample_scene)
        assert result.ids() == ['a']

    def test_accepts_shape_objects(self, sample_scene):
        circle = Circle(id='c', x=1, y=1, radius=1)
        assert request_scene(lambda p, s: [circle], 'x', sample_scene).shapes == [circle]
        assert request_scene(lambda p, s: Scene([circle]), 'x', sample_scene).shapes == [circle]

    def test_receives_prompt_and_copy_of_scene(self, sample_scene):
        calls = []

        def generator(prompt, scene):
            calls.append((prompt, scene))
            scene.remove('rect1')
            return []

        request_scene(generator, 'make it', sample_scene)
        assert calls[0][0] == 'make it'
        assert sample_scene.ids() == ['rect1', 'circle1', 'text1']

    def test_exception_becomes_generation_failure(self, sample_scene):
        def generator(prompt, scene):
            raise RuntimeError('quota exceeded')

        with pytest.raises(GenerationFailure, match='quota exceeded'):
            request_scene(generator, 'x', sample_scene)

    @pytest.mark.parametrize('answer', [
        'not a list',
        [{'type': 'HEXAGON', 'x': 0, 'y': 0}],
        [{'id': 'd', 'type': 'CIRCLE', 'x': 0, 'y': 0, 'radius': 1},
         {'id': 'd', 'type': 'CIRCLE', 'x': 1, 'y': 1, 'radius': 1}],
    ])
    def test_unusable_answer_becomes_generation_failure(self, sample_scene, answer):
        with pytest.raises(GenerationFailure):
            request_scene(lambda p, s: answer, 'x', sample_scene)


class TestExplainProgram:
    """Tests for explainer results and failures."""

    def test_returns_explanation(self):
        assert explain_program(lambda program: 'It cuts.', 'G21') == 'It cuts.'

    def test_exception_falls_back(self):
        def explainer(program):
            raise TimeoutError()

        assert explain_program(explainer, 'G21') == EXPLAIN_FALLBACK

    @pytest.mark.parametrize('answer', [None, '', '   ', 42])
    def test_empty_or_non_text_falls_back(self, answer):
        assert explain_program(lambda program: answer, 'G21') == EXPLAIN_FALLBACK

    def test_long_program_is_truncated(self):
        seen = []
        program = 'G21\n' + 'G01 X10.000 Y10.000\n' * 500

        explain_program(lambda text: seen.append(text) or 'Moves.', program)
        assert len(program) > EXPLAIN_MAX_CHARS
        assert seen == [program[:5000]]

    def test_short_program_is_sent_whole(self):
        seen = []
        explain_program(lambda text: seen.append(text) or 'Moves.', 'G21\nM30')
        assert seen == ['G21\nM30']


class TestAnnotation:
    """Tests for explanation comment formatting."""

    def test_format_annotation_prefixes_lines(self):
        assert format_annotation('one\ntwo') == ['; one', '; two']

    def test_blank_lines_become_bare_comments(self):
        assert format_annotation('one\n\ntwo') == ['; one', ';', '; two']

    def test_annotate_program(self):
        assert annotate_program('G21\nM30', 'Line one\nLine two') == \
            '; Line one\n; Line two\n\nG21\nM30'

    def test_explain_failure_falls_back(self):
        def explainer(program):
            raise ExplainFailure('rate limited')

        assert explain_program(explainer, 'G21') == EXPLAIN_FALLBACK
