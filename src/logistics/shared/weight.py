"""Weight value object."""

from protean.fields import Float

from logistics.domain import logistics


@logistics.value_object
class Weight:
    """Total shipment weight in kilograms. Never negative."""

    kilograms = Float(required=True, min_value=0.0)
