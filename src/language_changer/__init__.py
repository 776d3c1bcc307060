"""Language Changer - switch the display language of the League of Legends client.

This application provides:
    - Automatic discovery of the League of Legends installation folder
    - Reading the language currently configured in LeagueClientSettings.yaml
    - Rewriting that single locale value while leaving the file otherwise untouched

The application uses CustomTkinter for the GUI and stores its own
configuration in %APPDATA%/LanguageChanger.

Package Structure:
    app: Main application entry point and orchestrator
    config: Configuration management, paths and schemas
    core: Language catalog, install discovery and settings file access
    gui: User interface components (main window, dialogs)

Quick Start:
    Run from command line::

        language-changer

    Or programmatically::

        from language_changer.app import main
        main()

Configuration:
    - Config file: %APPDATA%/LanguageChanger/configuration.xml
    - Log file: %APPDATA%/LanguageChanger/language_changer.log
"""

__version__ = "1.0.0"
__app_name__ = "Language Changer"
