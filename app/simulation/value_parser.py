"""
simulation/value_parser.py

Parses component value strings ("10Ω", "1µF", "10mH", "4.7kOhm") into SI
base-unit magnitudes, and formats magnitudes back into display strings.

Grammar:
    value  := number [ws] [prefix] [unit]
    prefix := p | n | u | µ | μ | m | k | K | M | MEG | G
    unit   := Ω | ohm | ohms | F | H | V | A | Hz

Prefix and unit letters are disjoint, so "10mH" is milli-henry and "10H"
is plain henry. Prefix and unit must not be separated by whitespace.
"""
import re
from typing import Optional

# Dictionary of SI prefixes and their multipliers
# Includes common variations like 'u' for 'µ' and 'MEG' for 'M'
SI_PREFIX_MULTIPLIERS = {
    'p': 1e-12,  # Pico
    'n': 1e-9,   # Nano
    'u': 1e-6,   # Micro
    'µ': 1e-6,   # Micro (micro sign)
    'μ': 1e-6,   # Micro (greek mu)
    'm': 1e-3,   # Milli
    'k': 1e3,    # Kilo
    'K': 1e3,    # Kilo
    'M': 1e6,    # Mega
    'MEG': 1e6,  # Mega (SPICE variant)
    'G': 1e9,    # Giga
}

# For formatting, we iterate to find the best fit
FORMATTING_PREFIXES = sorted(
    [(1e9, 'G'), (1e6, 'M'), (1e3, 'k'),
     (1, ''), (1e-3, 'm'), (1e-6, 'µ'), (1e-9, 'n'), (1e-12, 'p')],
    key=lambda x: x[0], reverse=True
)

# UTF-8 "µ" decoded as Latin-1, as found in older catalog strings
_MOJIBAKE_MICRO = 'Âµ'

_VALUE_RE = re.compile(
    r'^\s*(?P<number>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)'
    r'\s*(?P<prefix>MEG|meg|[pnuµμmkKMG])?'
    r'(?P<unit>Ω|(?i:ohms?|hz)|[FHVA])?\s*$'
)


def parse_value(s) -> float:
    """
    Parses a value string with an optional SI prefix and unit into a float.
    Examples: "10k" -> 10000.0, "25mH" -> 0.025, "1µF" -> 1e-6

    Raises:
        ValueError: If the string does not follow the value grammar.
    """
    if not isinstance(s, str):
        return float(s)

    text = s.replace(_MOJIBAKE_MICRO, 'µ')
    match = _VALUE_RE.match(text)
    if not match:
        raise ValueError(f"Invalid number format: {s}")

    number = float(match.group('number'))
    prefix = match.group('prefix')
    if not prefix:
        return number
    return number * SI_PREFIX_MULTIPLIERS[prefix if prefix in SI_PREFIX_MULTIPLIERS else prefix.upper()]


def parse_quantity(s, default: Optional[float] = None) -> Optional[float]:
    """Best-effort parse: return ``default`` instead of raising."""
    if s is None:
        return default
    try:
        return parse_value(s)
    except (ValueError, TypeError):
        return default


def format_value(value: float, unit: str = "") -> str:
    """
    Formats a float into a string with the most appropriate SI prefix.
    Examples: 0.015 -> "15.00 m", 15000 -> "15 k"
    """
    if value == 0:
        return f"0.00 {unit}"

    abs_val = abs(value)

    for mult, prefix in FORMATTING_PREFIXES:
        if abs_val >= mult:
            scaled_val = value / mult
            # Format to 2 decimal places, but avoid trailing ".00" for integers
            if scaled_val == int(scaled_val):
                return f"{int(scaled_val)} {prefix}{unit}"
            else:
                return f"{scaled_val:.2f} {prefix}{unit}"

    # If value is smaller than the smallest prefix, use scientific notation
    return f"{value:.2e} {unit}"
