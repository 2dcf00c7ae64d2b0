from stressstrainplotter.config import PERCENT


def percent_to_fraction(percent: float) -> float:
    """Convert strain in percent to fractional strain."""
    return percent / PERCENT

def format_number(value: float) -> str:
    """Format a number for APDL output, dropping the fraction of integral values."""
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)
