from prometheus_client import Counter, Histogram


class BookingMetrics:
    """
    Booking and store metrics collector

    Tracks booking outcomes per selection mode and the latency of every
    round trip to the external store.
    """

    def __init__(self) -> None:
        # ========== Booking Business Metrics ==========
        self.booking_requests = Counter(
            'booking_requests_total',
            'Total booking requests',
            ['mode', 'result'],  # mode: manual/auto_assign
        )

        self.seats_booked = Counter('seats_booked_total', 'Total seats booked')

        self.seats_removed = Counter('seats_removed_total', 'Total seats removed from bookings')

        # ========== Store Operation Metrics ==========
        self.store_operations = Counter(
            'store_operations_total',
            'Total external store operations',
            ['operation', 'result'],
        )

        self.store_operation_duration = Histogram(
            'store_operation_duration_seconds',
            'External store operation duration',
            ['operation'],
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.0],
        )

        self.mirror_refreshes = Counter(
            'mirror_refreshes_total', 'Snapshot mirror refreshes', ['result']
        )

    # ========== Helper Methods ==========

    def record_booking(self, *, mode: str, result: str, seat_count: int = 0) -> None:
        self.booking_requests.labels(mode=mode, result=result).inc()
        if seat_count:
            self.seats_booked.inc(seat_count)

    def record_store_operation(self, *, operation: str, result: str, duration: float) -> None:
        self.store_operations.labels(operation=operation, result=result).inc()
        self.store_operation_duration.labels(operation=operation).observe(duration)


# Global metrics instance
metrics = BookingMetrics()
