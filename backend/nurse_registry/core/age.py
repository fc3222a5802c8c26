"""Age Derivation — form-filling convenience that suggests an age from a date of birth.

Invariants:
    - Calendar-year difference, minus one if the birthday has not yet occurred this year
    - Returns None for unparseable dates and non-positive results (form leaves age blank)
    - Suggestion only: the stored age is whatever the form submits
"""

from datetime import date


def derive_age(dob: str | date, today: date | None = None) -> int | None:
    """Suggest an age for dob as of today. Pure when today is given."""
    today = today or date.today()
    if isinstance(dob, str):
        try:
            dob = date.fromisoformat(dob.strip())
        except ValueError:
            return None
    age = today.year - dob.year
    if (today.month, today.day) < (dob.month, dob.day):
        age -= 1
    return age if age > 0 else None
