# src/pitchprompt/errors.py

EXIT_BAD_INPUT = 1
EXIT_ENVIRONMENT = 3


class PitchPromptError(Exception):
    """Base class for every error the pipeline raises on purpose."""
    exit_code = EXIT_BAD_INPUT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(PitchPromptError):
    """Caller supplied something the pipeline cannot work with."""
    exit_code = EXIT_BAD_INPUT


class ProjectNotFoundError(InputError):
    def __init__(self, path):
        super().__init__(f"Project directory not found: '{path}'")
        self.path = path


class UnknownTemplateError(InputError):
    def __init__(self, template_id: str, known):
        super().__init__(
            f"Unknown template '{template_id}' (expected one of: {', '.join(known)})"
        )
        self.template_id = template_id


class MissingRequiredFactError(InputError):
    def __init__(self, template_id: str, missing):
        self.missing = sorted(missing)
        super().__init__(
            f"Template '{template_id}' is missing required facts: {', '.join(self.missing)}"
        )
        self.template_id = template_id


class WriteError(PitchPromptError):
    """The prompt could not be persisted (permissions, disk full, ...)."""
    exit_code = EXIT_ENVIRONMENT

    def __init__(self, path, reason: str):
        super().__init__(f"Could not write '{path}': {reason}")
        self.path = path
        self.reason = reason
