from __future__ import annotations

# Exit codes of the per-page tool. The negative values are part of its
# command-line contract and must not be renumbered.
EXIT_NORMAL = 0
EXIT_NO_MARKDOWN = -1
EXIT_MISSING_VALUE = -2
EXIT_UNKNOWN_OPTION = -3
EXIT_NO_CSS_FILE = -4
EXIT_ABS_PATH_REQUIRED = -5
EXIT_INVOKED_OUTSIDE_HTML_ROOT = -6
EXIT_BAD_FLAGS = -7
EXIT_BAD_CONFIG = -8
EXIT_RENDER_FAILED = -9
EXIT_NO_IDENTITY = -10
EXIT_UNEXPECTED_STATE = -11

class WebpagesError(Exception):
    exit_code = 1

# ---- user / input errors ----

class UsageError(WebpagesError):
    """Bad command line or settings; reported with a message, never retried."""

class NoMarkdownFileError(UsageError):
    exit_code = EXIT_NO_MARKDOWN

class MissingValueError(UsageError):
    exit_code = EXIT_MISSING_VALUE

class UnknownOptionError(UsageError):
    exit_code = EXIT_UNKNOWN_OPTION

class AbsolutePathRequiredError(UsageError):
    exit_code = EXIT_ABS_PATH_REQUIRED

class BadFlagsError(UsageError):
    exit_code = EXIT_BAD_FLAGS

class ConfigError(UsageError):
    exit_code = EXIT_BAD_CONFIG

# ---- invariant violations: the whole build is invalid ----

class BuildError(WebpagesError):
    """Unrecoverable condition; any single page failure invalidates the tree."""

class NoStylesheetError(BuildError):
    exit_code = EXIT_NO_CSS_FILE

class OutsideRootError(BuildError):
    exit_code = EXIT_INVOKED_OUTSIDE_HTML_ROOT

class RenderError(BuildError):
    exit_code = EXIT_RENDER_FAILED

class IdentityError(BuildError):
    exit_code = EXIT_NO_IDENTITY

class UnexpectedStateError(BuildError):
    exit_code = EXIT_UNEXPECTED_STATE
