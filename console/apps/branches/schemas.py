from pydantic import ValidationError

from console.apps.menu.schemas import ApiModel
from console.utils.exceptions import BranchConfigurationError

PERCENTAGE_FIELDS = ('discountPercentage', 'serviceChargePercentage', 'taxPercentage')


class BranchConfiguration(ApiModel):
    """
    Per-branch pricing policy. Every field is required; from_api() is the one
    place where remote nulls are turned into values.
    """
    discount_percentage: float
    service_charge_percentage: float
    tax_percentage: float
    is_discount_on_total: bool

    @classmethod
    def from_api(cls, payload) -> "BranchConfiguration":
        """
        Load from the remote configuration record.
        Null percentages load as 0, a null isDiscountOnTotal loads as True.
        Raises BranchConfigurationError when the record is missing or malformed.
        """
        if not isinstance(payload, dict):
            raise BranchConfigurationError("Branch configuration is missing")

        data = {}
        for field in PERCENTAGE_FIELDS:
            value = payload.get(field)
            data[field] = 0 if value is None else value
        flag = payload.get('isDiscountOnTotal')
        data['isDiscountOnTotal'] = True if flag is None else flag

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise BranchConfigurationError(
                "Branch configuration is malformed",
                details={'errors': e.errors(include_url=False)},
            ) from e
