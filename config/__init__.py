"""
Config Package - Chua cac constants va cau hinh cua ung dung

Bao gom:
- paths: App name, version, encoding co dinh
- run_config: RunConfig bat bien, tao mot lan tu CLI args
"""

from config.paths import APP_NAME, APP_VERSION, TOKEN_ENCODING
from config.run_config import RunConfig, resolve_worker_count

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "TOKEN_ENCODING",
    "RunConfig",
    "resolve_worker_count",
]
