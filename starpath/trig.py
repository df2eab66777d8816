"""
trig.py
Degree-based trigonometry helpers.

Thin wrappers around the numpy radian functions so that every angle in the
package can stay in degrees. numpy float64 is used instead of the math
module because out-of-domain inputs must come back as NaN/inf rather than
raising (math.asin(1.0000001) is a ValueError, numpy.arcsin is NaN).

The expressions are written as deg * pi / 180 and rad * 180 / pi, in that
order, so results round the same way as the reference formulas.
"""

import numpy as np

# -----------------------------------------------------------------------------
# DEGREE TRIG
# -----------------------------------------------------------------------------

def sind(deg):
    """Sine of an angle given in degrees."""
    return float(np.sin(np.float64(deg) * np.pi / 180))


def cosd(deg):
    """Cosine of an angle given in degrees."""
    return float(np.cos(np.float64(deg) * np.pi / 180))


def asind(x):
    """
    Arcsine returning degrees.

    Args:
        x (float): Sine value. Values outside [-1, 1] give NaN.

    Returns:
        float: Angle in degrees in [-90, 90], or NaN.
    """
    with np.errstate(invalid="ignore"):
        return float(np.arcsin(np.float64(x)) * 180 / np.pi)


def atan2d(y, x):
    """
    Two-argument arctangent returning degrees in (-180, 180].

    Infinite components are handled the IEEE way (atan2(inf, inf) = 45 deg),
    NaN components give NaN.
    """
    return float(np.arctan2(np.float64(y), np.float64(x)) * (180 / np.pi))


# -----------------------------------------------------------------------------
# NORMALIZATION
# -----------------------------------------------------------------------------

def mod(a, b):
    """
    Native floating-point remainder (C fmod).

    The result carries the sign of the dividend, so mod(-30, 360) is -30,
    not 330. This is deliberately not Python's % operator.

    Args:
        a (float): Dividend.
        b (float): Divisor. Zero or NaN gives NaN.

    Returns:
        float: a - n*b for the integer n truncated toward zero.
    """
    with np.errstate(invalid="ignore"):
        return float(np.fmod(np.float64(a), np.float64(b)))


def wrap_angle_deg(angle):
    """
    Wrap an angle to the range [0, 360).

    Non-finite values are returned unchanged.
    """
    angle = mod(angle, 360.0)
    if angle < 0:
        angle += 360.0
        # tiny negatives round up to exactly 360
        if angle == 360.0:
            angle = 0.0
    return angle
