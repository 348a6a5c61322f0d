"""Tests for utility modules."""

import io
import logging
import time
import numpy as np
from consensus.utils.io_handler import read_ascii_floats, write_inliers, JSONWriter
from consensus.utils.logger import setup_logger, create_session_log_file
from consensus.utils.metrics import PerformanceMetrics, FitMetrics
from consensus.models.line import distance_of_point_to_straight_line


class TestIOHandler:
    """Test data and result I/O."""
    
    def test_read_ascii_floats(self):
        """Test parsing numbers across lines."""
        values = read_ascii_floats(io.StringIO("1 2.5\n-3e1   4\n\n5\n"))
        assert values.tolist() == [1.0, 2.5, -30.0, 4.0, 5.0]
    
    def test_read_skips_other_tokens(self):
        """Test that words are ignored."""
        values = read_ascii_floats(io.StringIO("x 1 y 2\n# 3\n"))
        assert values.tolist() == [1.0, 2.0, 3.0]
    
    def test_read_empty(self):
        """Test an empty stream."""
        assert len(read_ascii_floats(io.StringIO(""))) == 0
    
    def test_write_inliers(self):
        """Test writing the masked points."""
        out = io.StringIO()
        data = np.array([[1.0, 2.0], [3.0, 4.5], [5.0, 6.0]])
        write_inliers(out, data, np.array([True, False, True]))
        assert out.getvalue() == "1 2\n5 6\n"
    
    def test_json_round_trip(self, tmp_path):
        """Test saving and loading results."""
        path = tmp_path / "out" / "result.json"
        JSONWriter.save_results({"status": "success", "ninliers": 3}, str(path))
        assert JSONWriter.load_results(str(path)) == {"status": "success", "ninliers": 3}


class TestLogger:
    """Test logging setup."""
    
    def test_setup_logger(self):
        """Test console handler setup."""
        logger = setup_logger('consensus.test_setup', log_level=logging.DEBUG)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
    
    def test_repeated_setup(self):
        """Test that handlers are not duplicated."""
        setup_logger('consensus.test_repeat')
        logger = setup_logger('consensus.test_repeat')
        assert len(logger.handlers) == 1
    
    def test_file_handler(self, tmp_path):
        """Test logging to a file."""
        log_file = tmp_path / "logs" / "run.log"
        logger = setup_logger('consensus.test_file', log_file=str(log_file))
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
    
    def test_session_log_file(self, tmp_path):
        """Test the timestamped log file name."""
        name = create_session_log_file(str(tmp_path / "logs"))
        assert name.startswith(str(tmp_path / "logs"))
        assert name.endswith(".log")
        assert (tmp_path / "logs").is_dir()


class TestMetrics:
    """Test metrics."""
    
    def test_performance_metrics(self):
        """Test performance metrics tracking."""
        metrics = PerformanceMetrics()
        
        metrics.start_timer('test_operation')
        time.sleep(0.05)
        duration = metrics.stop_timer('test_operation')
        
        assert duration >= 40
        assert 'test_operation' in metrics.get_summary()
    
    def test_stop_unknown_timer(self):
        """Test stopping a timer that was never started."""
        assert PerformanceMetrics().stop_timer('missing') == 0.0
    
    def test_inlier_ratio(self):
        """Test the inlier ratio."""
        assert FitMetrics.inlier_ratio(3, 4) == 0.75
        assert FitMetrics.inlier_ratio(0, 0) == 0.0
    
    def test_residual_statistics(self):
        """Test error statistics of the inliers."""
        data = np.array([[0.0, 1.0], [0.0, -2.0], [0.0, 100.0]])
        model = np.array([0.0, 1.0, 0.0])  # y = 0
        stats = FitMetrics.residual_statistics(data, model, np.array([True, True, False]),
                                               distance_of_point_to_straight_line)
        assert stats['mean_error'] == 1.5
        assert stats['max_error'] == 2.0
        assert stats['rms_error'] == np.sqrt(2.5)
    
    def test_residual_statistics_empty(self):
        """Test statistics without inliers."""
        stats = FitMetrics.residual_statistics(np.zeros((2, 2)), np.array([0.0, 1.0, 0.0]),
                                               np.zeros(2, dtype=bool),
                                               distance_of_point_to_straight_line)
        assert stats['mean_error'] == 0.0
