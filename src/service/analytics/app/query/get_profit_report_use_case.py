from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.analytics.domain.profit_aggregation_domain import (
    ProfitReport,
    build_profit_report,
)
from src.service.shared_kernel.app.interface.i_store_snapshot_query_handler import (
    IStoreSnapshotQueryHandler,
)


class GetProfitReportUseCase:
    def __init__(
        self, *, snapshot_handler: IStoreSnapshotQueryHandler, default_seat_price: float
    ) -> None:
        self.snapshot_handler = snapshot_handler
        self.default_seat_price = default_seat_price
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        snapshot_handler: IStoreSnapshotQueryHandler = Depends(
            Provide[Container.store_snapshot_query_handler]
        ),
        config: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(snapshot_handler=snapshot_handler, default_seat_price=config.DEFAULT_SEAT_PRICE)

    @Logger.io
    async def get_report(self) -> ProfitReport:
        with self.tracer.start_as_current_span('use_case.get_profit_report') as span:
            snapshot = await self.snapshot_handler.get_snapshot()
            report = build_profit_report(snapshot, self.default_seat_price)
            span.set_attribute('report.days', len(report.daily))
            return report
