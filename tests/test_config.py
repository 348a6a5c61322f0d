"""Tests for config module."""

import pytest
from consensus.config import DEFAULT_CONFIG, load_config, merge_config


class TestConfig:
    """Test configuration module."""
    
    def test_default_config_exists(self):
        """Test that default config exists."""
        assert DEFAULT_CONFIG is not None
        assert isinstance(DEFAULT_CONFIG, dict)
    
    def test_ransac_config(self):
        """Test RANSAC configuration."""
        assert 'ransac' in DEFAULT_CONFIG
        ransac = DEFAULT_CONFIG['ransac']
        
        assert ransac['ntrials'] > 0
        assert ransac['max_error'] > 0
        assert ransac['min_inliers'] >= 0
        assert ransac['max_attempts'] == 10
        assert ransac['seed'] is None
    
    def test_logging_config(self):
        """Test logging configuration."""
        assert DEFAULT_CONFIG['logging']['level'] == 'INFO'
        assert DEFAULT_CONFIG['logging']['log_file'] is None
    
    def test_load_defaults(self):
        """Test loading without a file."""
        config = load_config()
        assert config == DEFAULT_CONFIG
        config['ransac']['ntrials'] = 1
        assert DEFAULT_CONFIG['ransac']['ntrials'] == 1000
    
    def test_load_yaml(self, tmp_path):
        """Test merging a YAML file over the defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("ransac:\n  ntrials: 50\n  seed: 3\nlogging:\n  level: DEBUG\n")
        config = load_config(str(path))
        assert config['ransac']['ntrials'] == 50
        assert config['ransac']['seed'] == 3
        assert config['ransac']['max_error'] == DEFAULT_CONFIG['ransac']['max_error']
        assert config['logging']['level'] == 'DEBUG'
    
    def test_empty_yaml(self, tmp_path):
        """Test an empty configuration file."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == DEFAULT_CONFIG
    
    def test_unknown_section(self, tmp_path):
        """Test that unknown sections are rejected."""
        path = tmp_path / "bad.yaml"
        path.write_text("detection:\n  canny_low: 50\n")
        with pytest.raises(ValueError):
            load_config(str(path))
    
    def test_not_a_mapping(self, tmp_path):
        """Test a file that is not a mapping."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_config(str(path))
    
    def test_merge_does_not_modify_base(self):
        """Test that merging copies the base."""
        merged = merge_config(DEFAULT_CONFIG, {'output': {'precision': 2}})
        assert merged['output']['precision'] == 2
        assert DEFAULT_CONFIG['output']['precision'] == 6
