# hashring/utils/metrics.py
import threading
import time
from collections import defaultdict

# Metrik sederhana tingkat modul, dipakai bersama oleh semua instance ring
metrics_data = defaultdict(lambda: {"count": 0, "total_time": 0.0, "value": 0})
_metrics_lock = threading.Lock()


def record_latency(metric_name, start_time):
    """Mencatat latensi untuk sebuah operasi."""
    duration = time.perf_counter() - start_time
    with _metrics_lock:
        metrics_data[metric_name]["count"] += 1
        metrics_data[metric_name]["total_time"] += duration


def increment_counter(metric_name, value=1):
    """Menambah nilai sebuah counter."""
    with _metrics_lock:
        metrics_data[metric_name]["value"] += value


def reset_metrics():
    with _metrics_lock:
        metrics_data.clear()


def get_metrics():
    """Mendapatkan metrik yang terkumpul."""
    report = {}
    with _metrics_lock:
        for name, data in metrics_data.items():
            if data["count"] > 0:  # Ini metrik latensi
                avg_latency = data["total_time"] / data["count"]
                report[name] = {
                    "requests_count": data["count"],
                    "average_latency_ms": avg_latency * 1000
                }
            elif data["value"] > 0:  # Ini metrik counter
                report[name] = {"count": data["value"]}
    return report
