"""Host environment probing."""

from ttyguard.host.probe import detect_platform, get_platform_info, host_os_name, reset_platform_info

__all__ = ["detect_platform", "get_platform_info", "host_os_name", "reset_platform_info"]
