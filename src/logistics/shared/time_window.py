"""TimeWindow value object for pickup and drop-off slots."""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime

from logistics.domain import logistics


@logistics.value_object
class TimeWindow:
    """An optional start/end pair.

    Either bound may be missing. When both are present the start must not
    come after the end.
    """

    start_at = DateTime()
    end_at = DateTime()

    @invariant.post
    def start_must_not_follow_end(self):
        if self.start_at and self.end_at and self.start_at > self.end_at:
            raise ValidationError({"time_window": ["Start time must not be after end time"]})

    def contains(self, moment: datetime) -> bool:
        """True when the window is open-ended or ``moment`` falls inside it."""
        if not self.start_at or not self.end_at:
            return True
        return self.start_at <= moment <= self.end_at
