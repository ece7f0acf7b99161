"""
Restaurant document models.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.enums import PlanType, BillingCycle, SubscriptionStatus

TRIAL_PERIOD_DAYS = 14


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _trial_end() -> datetime:
    return _utcnow() + timedelta(days=TRIAL_PERIOD_DAYS)


class Location(BaseModel):
    """Postal address of a restaurant"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True
    )

    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    country: str = "United States"


class RestaurantCreate(BaseModel):
    """A restaurant record owned by exactly one head chef"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        use_enum_values=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )

    restaurant_name: str = Field(..., min_length=1)
    restaurant_type: str = Field(..., min_length=1)
    location: Location
    head_chef_id: Any
    plan_type: PlanType = PlanType.TRIAL
    billing_cycle: BillingCycle = BillingCycle.MONTHLY
    subscription_status: SubscriptionStatus = SubscriptionStatus.ACTIVE
    stripe_customer_id: Optional[str] = None
    stripe_subscription_id: Optional[str] = None
    trial_end_date: datetime = Field(default_factory=_trial_end)
    is_active: bool = True
    signup_date: datetime = Field(default_factory=_utcnow)

    def to_document(self) -> dict:
        """Storage form with camelCase keys and timestamps"""
        doc = self.model_dump(by_alias=True)
        doc["headChefId"] = self.head_chef_id
        now = _utcnow()
        doc["createdAt"] = now
        doc["updatedAt"] = now
        return doc
