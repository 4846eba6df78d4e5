from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.calculator import DailyStatsCalculator
from .attendance.factory import ClassificationRuleFactory
from .common.logging_utils import configure_logging
from .config import EngineSettings, load_settings
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.in_memory_loan_repository import InMemoryLoanRepository
from .payroll.repository import LoanRepository
from .payroll.service import PayrollService
from .ranking.aggregator import RankingAggregator
from .schedules.resolver import ScheduleResolver


@dataclass(frozen=True)
class Engine:
    settings: EngineSettings

    resolver: ScheduleResolver
    daily: DailyStatsCalculator
    ranking: RankingAggregator
    payroll_calculator: StandardPayrollCalculator
    payroll_service: PayrollService


def build_engine(
    *,
    settings: Optional[EngineSettings] = None,
    loans: Optional[LoanRepository] = None,
    setup_logging: bool = False,
) -> Engine:
    settings = settings or load_settings()
    if setup_logging:
        configure_logging(settings.log_level)

    resolver = ScheduleResolver(default_branch=settings.default_branch)
    daily = DailyStatsCalculator(rule_factory=ClassificationRuleFactory())
    ranking = RankingAggregator(daily=daily, honor_configured_weights=settings.honor_configured_weights)
    payroll_calculator = StandardPayrollCalculator(daily=daily)
    payroll_service = PayrollService(loans or InMemoryLoanRepository(), calculator=payroll_calculator)

    return Engine(
        settings=settings,
        resolver=resolver,
        daily=daily,
        ranking=ranking,
        payroll_calculator=payroll_calculator,
        payroll_service=payroll_service,
    )
