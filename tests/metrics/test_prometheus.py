import pytest
from unittest.mock import patch
from cgroup_label.metrics.prometheus import PrometheusMetrics

def test_start_metrics_server_uses_settings_port():
    """설정된 포트로 메트릭 서버를 데몬 쓰레드에서 시작"""
    with patch('cgroup_label.metrics.prometheus.settings') as mock_settings, \
            patch('cgroup_label.metrics.prometheus.start_http_server') as mock_start:
        mock_settings.prometheus_port = 9999
        metrics = PrometheusMetrics()

        thread = metrics.start_metrics_server()
        thread.join(timeout=1.0)

        assert thread.daemon is True
        assert thread.name == "prometheus-metrics-server"
        mock_start.assert_called_once_with(9999)

def test_explicit_port():
    with patch('cgroup_label.metrics.prometheus.start_http_server') as mock_start:
        PrometheusMetrics(port=9101)._run_metrics_server()
        mock_start.assert_called_once_with(9101)

def test_server_start_failure_is_raised():
    """서버 시작 실패는 로그 후 다시 발생"""
    with patch('cgroup_label.metrics.prometheus.start_http_server', side_effect=OSError("in use")):
        with pytest.raises(OSError):
            PrometheusMetrics(port=9102)._run_metrics_server()
