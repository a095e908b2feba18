"""Product variants sold by the clinic.

Vaccines, dose bundles ("programs") and vaccination packages share the
``products`` collection and are told apart by the ``type`` field.
"""
from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import Field, TypeAdapter

from vaqmas.models.base import FirestoreModel

ProductType = Literal["vaccine", "bundle", "package"]
AgeUnit = Literal["months", "years"]


class ProductBase(FirestoreModel):
    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    common_name: str = ""
    description: str = ""
    price: Optional[float] = None
    old_price: Optional[float] = None
    manufacturer: Optional[str] = None
    # Bare file name; the folder is derived from the product type
    image_url: str = ""
    applicable_doctors: List[str] = []
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    age_unit: AgeUnit = "months"
    special_indications: Optional[str] = None
    is_hidden: bool = False
    created_at: Optional[datetime] = None
    # Filled in when served, never stored
    resolved_image_url: Optional[str] = None


class Vaccine(ProductBase):
    type: Literal["vaccine"] = "vaccine"
    category: Literal["vaccine", "medication", "supplement"] = "vaccine"
    dosage_info: str = ""
    target_diseases: str = ""
    doses_and_boosters: str = ""
    contraindications: Optional[str] = None
    precautions: Optional[str] = None


class DoseBundle(ProductBase):
    type: Literal["bundle"] = "bundle"
    included_product_ids: List[str] = []
    target_milestone: Optional[str] = None
    can_pay_for_whole_program: bool = False


class VaccinationProgram(ProductBase):
    type: Literal["package"] = "package"
    included_product_ids: List[str] = []
    included_dose_bundles: List[str] = []
    can_pay_for_whole_program: bool = False


Product = Annotated[
    Union[Vaccine, DoseBundle, VaccinationProgram],
    Field(discriminator="type"),
]

_product_adapter = TypeAdapter(Product)


def parse_product(data: Dict[str, Any], doc_id: Optional[str] = None):
    """Validate a stored document into its product variant."""
    payload = dict(data)
    if doc_id is not None:
        payload["id"] = doc_id
    return _product_adapter.validate_python(payload)


def is_composite(product) -> bool:
    """Bundles and packages reference other products; vaccines do not."""
    if isinstance(product, Vaccine):
        return False
    if isinstance(product, (DoseBundle, VaccinationProgram)):
        return True
    raise TypeError(f"Unknown product variant: {type(product).__name__}")
