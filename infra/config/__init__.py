from .filesystem_config_provider import CONFIG_FILENAME, FileSystemConfigProvider

__all__ = ["FileSystemConfigProvider", "CONFIG_FILENAME"]
