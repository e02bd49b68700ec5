"""
Constants shared across eulerode.

Messages
--------
All user-facing error text lives here so the prompts, the expression
binder and the command line report failures with identical wording.

Expression Variables
--------------------
Default names of the independent and dependent variables. The constants
and functions an expression may use are defined in :mod:`eulerode.expression`.
"""

# =============================================================================
# Error Messages
# =============================================================================

INVALID_INPUT = "Invalid input was supplied. Please try again."
CANNOT_PARSE = "Input could not be parsed as a 64 bit floating point number. Please try again."

SMALLER_UPPER_BOUND = "The upper bound cannot be smaller than the lower bound. Please try again."

FLOAT_STEP_COUNT = "The amount of steps must be a whole number. Please try again."
NEGATIVE_ZERO_STEP_COUNT = "The amount of steps cannot be zero or negative. Please try again."

FLOAT_ROUND_PLACES = "The amount of places must be a whole number. Please try again."
NEGATIVE_ZERO_ROUND_PLACES = "The amount of places cannot be zero or negative. Please try again."

INVALID_DIFFERENTIAL_EXPRESSION = (
    "The differential expression you entered is either invalid, or contains unparseable tokens. "
    "Please reference the README for more information regarding the supported syntax and required "
    "format for a differential expression and try again."
)

UNBOUND_DIFFERENTIAL_EXPRESSION = "The differential expression could not be bound using the current context:"

# =============================================================================
# Prompts
# =============================================================================

PROMPT_LOWER_BOUND = "Enter lower bound a:"
PROMPT_UPPER_BOUND = "Enter upper bound b:"
PROMPT_STEP_COUNT = "Enter the amount of steps N:"
PROMPT_ROUND_PLACES = "Enter the amount of decimal places the step size should be rounded to:"
PROMPT_EXPRESSION = "Enter the differential expression to approximate:"
PROMPT_INITIAL_VALUE = "Enter the initial value for the function at a:"

# =============================================================================
# Expression Variables
# =============================================================================

VAR_X = "x"
VAR_Y = "y"

# =============================================================================
# Logging
# =============================================================================

LOGGER_NAME = "eulerode"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
