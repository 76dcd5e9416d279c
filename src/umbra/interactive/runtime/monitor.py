# どこで: `src/umbra/interactive/runtime/monitor.py`。
# 何を: interactive 実行中の軽量メトリクス（FPS / CPU / RSS / ラスタ時間）を集計し、GUI 表示用スナップショットを提供する。
# なぜ: スライダー操作中の描画負荷（特に大きなぼかし半径）を Parameter GUI 上で把握できるようにするため。

from __future__ import annotations

import os
import time
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MonitorSnapshot:
    """Parameter GUI に表示する監視値のスナップショット。"""

    fps: float
    cpu_percent: float
    rss_mb: float
    raster_ms: float


class RuntimeMonitor:
    """interactive 実行中のメトリクスを集計する。"""

    def __init__(
        self,
        *,
        cpu_mem_sample_interval_s: float = 0.5,
        fps_sample_interval_s: float = 0.5,
    ) -> None:
        self._cpu_mem_sample_interval_s = float(cpu_mem_sample_interval_s)

        self._fps_sample_interval_s = float(fps_sample_interval_s)
        self._fps = 0.0
        self._fps_window_t0: float | None = None
        self._fps_window_frames = 0

        self._last_sample_t: float | None = None
        self._last_cpu_s: float | None = None
        self._cpu_percent = 0.0
        self._rss_mb = 0.0
        self._raster_ms = 0.0

        try:
            import psutil  # type: ignore[import-untyped]
        except ImportError as exc:
            raise RuntimeError("RuntimeMonitor には psutil が必要です") from exc

        self._process = psutil.Process(int(os.getpid()))

    def tick_frame(self) -> None:
        """フレーム境界を通知し、FPS/CPU/Mem を更新する。"""

        now = time.perf_counter()

        if self._fps_window_t0 is None:
            self._fps_window_t0 = now
            self._fps_window_frames = 0

        self._fps_window_frames += 1
        dt = now - self._fps_window_t0
        if dt >= self._fps_sample_interval_s and dt > 0.0:
            self._fps = self._fps_window_frames / dt
            self._fps_window_t0 = now
            self._fps_window_frames = 0

        last = self._last_sample_t
        if last is None:
            self._last_sample_t = now
            self._last_cpu_s = self._cpu_s()
            self._rss_mb = self._rss_bytes() / (1024.0 * 1024.0)
            return

        wall_dt = now - last
        if wall_dt < self._cpu_mem_sample_interval_s:
            return

        cpu_s = self._cpu_s()
        cpu_dt = cpu_s - float(self._last_cpu_s or 0.0)
        if wall_dt > 0.0 and cpu_dt >= 0.0:
            self._cpu_percent = 100.0 * cpu_dt / wall_dt

        self._rss_mb = self._rss_bytes() / (1024.0 * 1024.0)
        self._last_sample_t = now
        self._last_cpu_s = cpu_s

    def set_raster_time(self, seconds: float) -> None:
        """直近のラスタライズ所要時間（秒）を記録する。"""

        self._raster_ms = float(seconds) * 1000.0

    def snapshot(self) -> MonitorSnapshot:
        """現在の監視値をスナップショットとして返す。"""

        return MonitorSnapshot(
            fps=float(self._fps),
            cpu_percent=float(self._cpu_percent),
            rss_mb=float(self._rss_mb),
            raster_ms=float(self._raster_ms),
        )

    def _cpu_s(self) -> float:
        t = self._process.cpu_times()
        return float(getattr(t, "user", 0.0)) + float(getattr(t, "system", 0.0))

    def _rss_bytes(self) -> int:
        return int(self._process.memory_info().rss)
