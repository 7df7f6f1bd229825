from typing import Dict


def init_metrics() -> Dict[str, int | float | bool]:
    return {
        'rooms_placed': 0,
        'placement_rejections': 0,
        'tunnels_carved': 0,
        'joints_patched': 0,
        'monsters_spawned': 0,
        'quota_exhausted': False,
        'runtime_ms': 0.0,
    }
