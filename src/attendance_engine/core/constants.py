"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import Role

MINUTES_PER_DAY = 1440

# Branch defaults used by the schedule resolver when the stored config is silent.
OFFICE_DEFAULTS = {
    "workStartTime": "09:00",
    "workEndTime": "17:00",
    "weekendDays": (5, 6),  # Friday and Saturday (0 = Sunday)
    "gracePeriodMinutes": 30,
    "penaltyValue": 0,
    "payrollDaysBase": 30,
    "payrollHoursBase": 8,
}

FACTORY_DEFAULTS = {
    "workStartTime": "08:00",
    "workEndTime": "16:00",
    "weekendDays": (5,),  # Friday only
    "gracePeriodMinutes": 15,
    "penaltyValue": 1,
    "payrollDaysBase": 30,
    "payrollHoursBase": 9,
}

# Fixed split of the 100-point score.
WEIGHT_OVERTIME = 80
WEIGHT_COMMITMENT = 10
WEIGHT_ABSENCE = 10
MAX_SCORE = 100

RANKING_EXEMPT_ROLES = frozenset(
    {
        Role.OWNER,
        Role.GENERAL_MANAGER,
        Role.MANAGER,
        Role.OFFICE_MANAGER,
    }
)

QUARTERLY_MONTHS = (3, 6, 9, 12)
