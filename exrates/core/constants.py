"""
Constants for the NB RB API and rate averaging.
"""

class NbrbConstants:
    """Paths, parameters and JSON fields of the NB RB exchange rates API."""
    
    RATES_PATH = "/exrates/rates"
    DYNAMICS_PATH = "/exrates/rates/dynamics"
    
    # parammode=2 looks a currency up by its ISO letter code
    PARAM_MODE_LETTER_CODE = 2
    
    # JSON field names
    CURRENCY_ID_FIELD = "Cur_ID"
    DATE_FIELD = "Date"
    OFFICIAL_RATE_FIELD = "Cur_OfficialRate"


class AveragingConstants:
    """Rounding applied to monthly average rates."""
    
    # Two fractional digits, rounded half-up
    QUANTUM = "0.01"
