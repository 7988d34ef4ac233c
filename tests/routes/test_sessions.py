"""Tests for editing session routes."""
import json

import pytest

from shapecam.assistant import EXPLAIN_FALLBACK


def post_json(client, url, payload=None, method='post'):
    return getattr(client, method)(
        url,
        data=json.dumps(payload if payload is not None else {}),
        content_type='application/json'
    )


@pytest.fixture
def session_id(client, sample_shape_dicts):
    """Create a session with a rectangle and a circle."""
    response = post_json(client, '/api/sessions', {'shapes': sample_shape_dicts})
    return json.loads(response.data)['data']['id']


class TestSessionLifecycle:
    """Tests for creating, reading and deleting sessions."""

    def test_create_session(self, client, sample_shape_dicts):
        response = post_json(client, '/api/sessions', {'shapes': sample_shape_dicts})

        assert response.status_code == 201
        data = json.loads(response.data)['data']
        assert data['mode'] == 'derived'
        assert [s['id'] for s in data['shapes']] == ['rect1', 'circle1']
        assert data['settings'] == {
            'feedRate': 800.0, 'safeHeight': 5.0, 'cutDepth': 2.0, 'toolDiameter': 3.175
        }
        assert '; shape rectangle rect1' in data['program']

    def test_create_empty_session(self, client):
        response = client.post('/api/sessions')
        assert response.status_code == 201
        assert json.loads(response.data)['data']['shapes'] == []

    def test_create_session_bad_shapes(self, client):
        response = post_json(client, '/api/sessions', {'shapes': [{'type': 'CIRCLE'}]})
        assert response.status_code == 400

    @pytest.mark.parametrize('settings', [[800, 5], 'fast'])
    def test_create_session_settings_not_an_object(self, client, settings):
        response = post_json(client, '/api/sessions', {'shapes': [], 'settings': settings})
        assert response.status_code == 400
        assert 'settings must be an object' in json.loads(response.data)['message']

    def test_get_session(self, client, session_id):
        response = client.get(f'/api/sessions/{session_id}')
        assert response.status_code == 200
        assert json.loads(response.data)['data']['id'] == session_id

    def test_get_unknown_session(self, client):
        response = client.get('/api/sessions/nonexistent')
        assert response.status_code == 404
        assert json.loads(response.data)['status'] == 'error'

    def test_delete_session(self, client, session_id):
        assert client.delete(f'/api/sessions/{session_id}').status_code == 200
        assert client.get(f'/api/sessions/{session_id}').status_code == 404
        assert client.delete(f'/api/sessions/{session_id}').status_code == 404


class TestSceneEditing:
    """Tests for shape and settings changes."""

    def test_add_shape(self, client, session_id):
        response = post_json(client, f'/api/sessions/{session_id}/shapes', {
            'id': 't1', 'type': 'TEXT', 'x': 0, 'y': 0, 'text': 'HI', 'fontSize': 10
        })

        assert response.status_code == 201
        data = json.loads(response.data)['data']
        assert [s['id'] for s in data['shapes']] == ['rect1', 'circle1', 't1']
        assert '; shape text t1' in data['program']

    def test_add_duplicate_shape(self, client, session_id, sample_shape_dicts):
        response = post_json(client, f'/api/sessions/{session_id}/shapes', sample_shape_dicts[0])
        assert response.status_code == 400

    def test_update_shape(self, client, session_id):
        response = post_json(
            client, f'/api/sessions/{session_id}/shapes/circle1', {'radius': 10}, method='put'
        )

        assert response.status_code == 200
        shapes = json.loads(response.data)['data']['shapes']
        assert shapes[1]['radius'] == 10

    def test_update_unknown_shape(self, client, session_id):
        response = post_json(
            client, f'/api/sessions/{session_id}/shapes/missing', {'radius': 10}, method='put'
        )
        assert response.status_code == 404

    def test_delete_shape(self, client, session_id):
        response = client.delete(f'/api/sessions/{session_id}/shapes/rect1')
        assert response.status_code == 200
        data = json.loads(response.data)['data']
        assert [s['id'] for s in data['shapes']] == ['circle1']
        assert 'rect1' not in data['program']

    def test_delete_unknown_shape(self, client, session_id):
        assert client.delete(f'/api/sessions/{session_id}/shapes/missing').status_code == 404

    def test_replace_scene(self, client, session_id):
        response = post_json(client, f'/api/sessions/{session_id}/scene', {'shapes': []}, method='put')
        assert response.status_code == 200
        assert json.loads(response.data)['data']['program'] == 'G21\nG90\nG00 Z5.000\nM05\nM30'

    def test_replace_scene_requires_shapes(self, client, session_id):
        response = post_json(client, f'/api/sessions/{session_id}/scene', {}, method='put')
        assert response.status_code == 400

    def test_update_settings(self, client, session_id):
        response = post_json(
            client, f'/api/sessions/{session_id}/settings', {'cutDepth': 1.5}, method='put'
        )

        assert response.status_code == 200
        data = json.loads(response.data)['data']
        assert data['settings']['cutDepth'] == 1.5
        assert 'G01 Z-1.500 F800.0' in data['program']

    def test_update_settings_invalid(self, client, session_id):
        response = post_json(
            client, f'/api/sessions/{session_id}/settings', {'toolDiameter': -1}, method='put'
        )
        assert response.status_code == 400


class TestProgramEditing:
    """Tests for manual edits and regeneration."""

    def test_manual_edit_survives_scene_change(self, client, session_id):
        post_json(client, f'/api/sessions/{session_id}/program', {'program': '; mine'}, method='put')
        response = client.delete(f'/api/sessions/{session_id}/shapes/rect1')

        data = json.loads(response.data)['data']
        assert data['mode'] == 'manual'
        assert data['program'] == '; mine'

    def test_edit_requires_program_string(self, client, session_id):
        response = post_json(client, f'/api/sessions/{session_id}/program', {'program': 5}, method='put')
        assert response.status_code == 400

    def test_regenerate(self, client, session_id):
        original = json.loads(client.get(f'/api/sessions/{session_id}').data)['data']['program']
        post_json(client, f'/api/sessions/{session_id}/program', {'program': '; mine'}, method='put')

        response = client.post(f'/api/sessions/{session_id}/regenerate')
        data = json.loads(response.data)['data']
        assert data['mode'] == 'derived'
        assert data['program'] == original

    def test_download(self, client, session_id):
        """Test downloading the program as a plain text file."""
        program = json.loads(client.get(f'/api/sessions/{session_id}').data)['data']['program']
        response = client.get(f'/api/sessions/{session_id}/download')

        assert response.status_code == 200
        assert response.content_type.startswith('text/plain')
        assert 'attachment' in response.headers.get('Content-Disposition', '')
        assert 'toolpath.gcode' in response.headers.get('Content-Disposition', '')
        assert response.data.decode('utf-8') == program

    def test_download_custom_name(self, client, session_id):
        response = client.get(f'/api/sessions/{session_id}/download?name=front%20panel')
        assert 'front_panel.gcode' in response.headers.get('Content-Disposition', '')

    def test_download_unknown_session(self, client):
        assert client.get('/api/sessions/nonexistent/download').status_code == 404


class TestCollaborators:
    """Tests for prompt generation and explanation routes."""

    def test_generate_not_configured(self, client, session_id):
        response = post_json(client, f'/api/sessions/{session_id}/generate', {'prompt': 'a star'})
        assert response.status_code == 503

    def test_generate_requires_prompt(self, client, session_id):
        response = post_json(client, f'/api/sessions/{session_id}/generate', {'prompt': '  '})
        assert response.status_code == 400

    def test_generate(self, app, client, session_id):
        app.config['SHAPE_GENERATOR'] = lambda prompt, scene: [
            {'id': 'g1', 'type': 'RECTANGLE', 'x': 0, 'y': 0, 'width': 10, 'height': 10}
        ]
        response = post_json(client, f'/api/sessions/{session_id}/generate', {'prompt': 'a square'})

        assert response.status_code == 200
        data = json.loads(response.data)['data']
        assert [s['id'] for s in data['shapes']] == ['g1']
        assert '; shape rectangle g1' in data['program']

    def test_generate_failure_keeps_scene(self, app, client, session_id):
        def generator(prompt, scene):
            raise RuntimeError('model unavailable')

        app.config['SHAPE_GENERATOR'] = generator
        response = post_json(client, f'/api/sessions/{session_id}/generate', {'prompt': 'a square'})

        assert response.status_code == 502
        assert 'model unavailable' in json.loads(response.data)['message']
        shapes = json.loads(client.get(f'/api/sessions/{session_id}').data)['data']['shapes']
        assert [s['id'] for s in shapes] == ['rect1', 'circle1']

    def test_explain(self, app, client, session_id):
        app.config['PROGRAM_EXPLAINER'] = lambda program: 'Cuts a square and a circle.'
        response = client.post(f'/api/sessions/{session_id}/explain')

        assert response.status_code == 200
        data = json.loads(response.data)['data']
        assert data['explanation'] == 'Cuts a square and a circle.'
        assert data['program'].startswith('; Cuts a square and a circle.\n\nG21')
        assert data['mode'] == 'manual'

    def test_explain_not_configured(self, client, session_id):
        response = client.post(f'/api/sessions/{session_id}/explain')
        data = json.loads(response.data)['data']
        assert data['explanation'] == EXPLAIN_FALLBACK
        assert data['program'].startswith(f'; {EXPLAIN_FALLBACK}')

    def test_explain_empty_program(self, app, client, session_id):
        app.config['PROGRAM_EXPLAINER'] = lambda program: 'Should not be asked.'
        post_json(client, f'/api/sessions/{session_id}/program', {'program': ''}, method='put')
        response = client.post(f'/api/sessions/{session_id}/explain')

        assert response.status_code == 200
        data = json.loads(response.data)['data']
        assert data['explanation'] is None
        assert data['program'] == ''
