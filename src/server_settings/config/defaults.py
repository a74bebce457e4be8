"""
Default configuration values for Server Settings.
"""

DEFAULT_CONFIG = {
    "version": "1.0.0",
    "environment": {
        # Azure App Service style injection: APPSETTING_<name>
        "prefix": "APPSETTING_",
    },
    "files": {
        # <home>/settings/<program-name>.xml
        "home_directory_name": "settings",
        "extension": ".xml",
        # <package-directory>/settings.xml
        "local_file_name": "settings.xml",
    },
    "xml": {
        "root_element": "settings",
        "entry_element": "setting",
        "name_attribute": "name",
        "value_attribute": "value",
    },
    "platform": {
        # None falls back to the running QCoreApplication's identity
        "organization_name": None,
        "application_name": None,
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "console_enabled": True,
        "file_enabled": False,
        "file_path": "server_settings.log",
    },
}
