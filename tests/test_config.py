"""
Tests for JSON settings and release-mode error reporting.
"""
import json

import pytest

from vector_editor.constants import DEFAULT_CONFIG
from vector_editor.models.document import Document
from vector_editor.utils import logger
from vector_editor.utils.config import load_config, save_config, style_options


class TestConfig:

    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(str(tmp_path / 'absent.json'))
        assert config == DEFAULT_CONFIG

    def test_defaults_not_shared(self, tmp_path):
        config = load_config(str(tmp_path / 'absent.json'))
        config['view_box']['width'] = 1
        assert DEFAULT_CONFIG['view_box']['width'] == 800

    def test_stored_keys_override(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'grid_size': 40, 'fill': '#000000'}))
        config = load_config(str(path))
        assert config['grid_size'] == 40
        assert config['fill'] == '#000000'
        assert config['stroke'] == DEFAULT_CONFIG['stroke']

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'theme': 'dark'}))
        assert 'theme' not in load_config(str(path))

    def test_save_then_load(self, tmp_path):
        path = str(tmp_path / 'nested' / 'config.json')
        config = dict(DEFAULT_CONFIG, snap_to_grid=True, grid_size=25)
        save_config(config, path)
        loaded = load_config(path)
        assert loaded['snap_to_grid'] is True
        assert loaded['grid_size'] == 25

    def test_corrupt_file_raises(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('{not json')
        with pytest.raises(ValueError):
            load_config(str(path))

    def test_style_options(self):
        options = style_options(DEFAULT_CONFIG)
        assert options['fill'] == DEFAULT_CONFIG['fill']
        assert set(options) == {'fill', 'stroke', 'stroke_width', 'font_size', 'font_family'}


class TestLoggerRaise:

    def test_release_mode_reports_then_raises(self):
        reports = []
        logger.set_debug_mode(False)
        logger.set_error_handler(lambda title, message: reports.append((title, message)))
        with pytest.raises(ValueError):
            Document().set_tool('spray')
        assert len(reports) == 1
        assert 'spray' in reports[0][1]

    def test_release_mode_without_handler_still_raises(self):
        logger.set_debug_mode(False)
        with pytest.raises(ValueError):
            Document().set_tool('spray')

    def test_debug_mode_skips_handler(self):
        reports = []
        logger.set_error_handler(lambda title, message: reports.append(message))
        with pytest.raises(ValueError):
            Document().set_tool('spray')
        assert reports == []
