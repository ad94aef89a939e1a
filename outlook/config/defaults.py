"""Default upstream dataset parameters."""

from outlook.models.common import Variable

POWER_DAILY_URL = "https://power.larc.nasa.gov/api/temporal/daily/point"

DEFAULT_VARIABLES: tuple[Variable, ...] = (
    Variable.T2M,
    Variable.PRECTOTCORR,
    Variable.WS2M,
    Variable.RH2M,
    Variable.SNODP,
)

DEFAULT_START_DATE = "20000101"
DEFAULT_END_DATE = "20241231"
