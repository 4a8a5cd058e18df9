from pydantic import BaseModel, Field


class Pi3GPIOConfig(BaseModel):
    # How the program is called in help messages, "./pi3gpio" for a local build.
    app_call: str = "pi3gpio"
    # Explain how to grant access to GPIO memory for snap installs.
    show_access_help: bool = True
    logging: dict = Field(
        default_factory=lambda: {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "formatter": {
                    "validate": True,
                    "format": "%(asctime)s %(levelname)-5.5s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "formatter",
                    # Standard output is reserved for pin reports.
                    "stream": "ext://sys.stderr",
                },
            },
            "root": {
                "level": "WARNING",
                "handlers": ["console"],
            },
        }
    )

    @property
    def help_suggestion(self) -> str:
        return f'For help run "sudo {self.app_call} help"'
