"""Package sorting module for Thoughtful's robotic automation factory."""

import enum
import logging
import math
import numbers

logger = logging.getLogger(__name__)

VOLUME_THRESHOLD = 1_000_000  # cm^3
DIMENSION_THRESHOLD = 150  # cm
MASS_THRESHOLD = 20  # kg


class Stack(str, enum.Enum):
    """Destination stack for a sorted package."""

    STANDARD = "STANDARD"
    SPECIAL = "SPECIAL"
    REJECTED = "REJECTED"

    @property
    def severity(self):
        """How restrictive the stack is: 0 standard, 1 special, 2 rejected."""
        return _SEVERITY[self]

    def __str__(self):
        return self.value


_SEVERITY = {Stack.STANDARD: 0, Stack.SPECIAL: 1, Stack.REJECTED: 2}


class PackageValidationError(ValueError):
    """A sensor reading that cannot be used for sorting.

    Attributes:
        param: Name of the offending parameter.
        value: The value that was received.
    """

    def __init__(self, param, value, message):
        super().__init__(message)
        self.param = param
        self.value = value


class InvalidTypeError(PackageValidationError, TypeError):
    """The reading is not a number at all."""

    def __init__(self, param, value):
        self.received_type = type(value).__name__
        super().__init__(
            param,
            value,
            f"{param} must be a number, "
            f"got {self.received_type} ({value!s})",
        )


class InvalidRangeError(PackageValidationError):
    """The reading is a number, but not a usable one."""


class NonFiniteError(InvalidRangeError):
    def __init__(self, param, value):
        super().__init__(
            param, value, f"{param} must be finite, got {_format_special(value)}"
        )


class NonPositiveError(InvalidRangeError):
    def __init__(self, param, value):
        super().__init__(param, value, f"{param} must be positive, got {value}")


def _format_special(value):
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def _reject(error):
    logger.warning("Rejected %s reading: %s", error.param, error)
    raise error


def validate_measurement(name, value):
    """Check a single reading and return it as a float.

    Checks run in order: type, finiteness, then positivity.

    Args:
        name: Parameter name used in error messages.
        value: The raw reading.

    Returns:
        The reading as a float.

    Raises:
        InvalidTypeError: If the value is not a real number (bools and
            None included).
        NonFiniteError: If the value is NaN or infinite.
        NonPositiveError: If the value is zero or negative.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        _reject(InvalidTypeError(name, value))

    try:
        number = float(value)
    except OverflowError:
        # Integers past the double range.
        number = math.inf if value > 0 else -math.inf

    if not math.isfinite(number):
        _reject(NonFiniteError(name, number))
    if number <= 0:
        _reject(NonPositiveError(name, value))
    return number


def _validate_package(width, height, length, mass):
    return (
        validate_measurement("width", width),
        validate_measurement("height", height),
        validate_measurement("length", length),
        validate_measurement("mass", mass),
    )


def is_bulky(width: float, height: float, length: float) -> bool:
    """Return True if the volume or any single dimension hits its threshold."""
    volume = width * height * length
    return volume >= VOLUME_THRESHOLD or max(width, height, length) >= DIMENSION_THRESHOLD


def is_heavy(mass: float) -> bool:
    return mass >= MASS_THRESHOLD


def _dispatch(bulky, heavy):
    if bulky and heavy:
        return Stack.REJECTED
    if bulky or heavy:
        return Stack.SPECIAL
    return Stack.STANDARD


def sort(width=None, height=None, length=None, mass=None) -> Stack:
    """Dispatch a package to the correct stack based on dimensions and mass.

    Args:
        width: Package width in centimeters.
        height: Package height in centimeters.
        length: Package length in centimeters.
        mass: Package mass in kilograms.

    Returns:
        Stack.STANDARD, Stack.SPECIAL, or Stack.REJECTED.

    Raises:
        InvalidTypeError: If any reading is missing or not a number.
        NonFiniteError: If any reading is NaN or infinite.
        NonPositiveError: If any reading is zero or negative.
    """
    return sort_with_details(width, height, length, mass)["stack"]


classify = sort


def sort_with_details(width=None, height=None, length=None, mass=None):
    """Sort a package and return a detailed result breakdown.

    Validation failures propagate exactly as they do from sort().

    Args:
        width: Package width in centimeters.
        height: Package height in centimeters.
        length: Package length in centimeters.
        mass: Package mass in kilograms.

    Returns:
        A dict with keys:
            stack: the Stack the package goes to.
            dimensions: {"width": ..., "height": ..., "length": ...}.
            volume_cm3: width * height * length.
            mass_kg: the mass as a float.
            is_bulky: whether the package is bulky.
            is_heavy: whether the package is heavy.
    """
    width, height, length, mass = _validate_package(width, height, length, mass)

    volume = width * height * length
    bulky = is_bulky(width, height, length)
    heavy = is_heavy(mass)
    stack = _dispatch(bulky, heavy)

    logger.debug(
        "Sorted package volume=%s mass=%s bulky=%s heavy=%s -> %s",
        volume, mass, bulky, heavy, stack,
    )
    return {
        "stack": stack,
        "dimensions": {
            "width": width,
            "height": height,
            "length": length,
        },
        "volume_cm3": volume,
        "mass_kg": mass,
        "is_bulky": bulky,
        "is_heavy": heavy,
    }
