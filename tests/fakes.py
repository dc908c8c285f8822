"""Repository doubles and sample records for service tests."""

from datetime import date
from unittest.mock import create_autospec

from wms_api.schemas.batch import ProductBatchCreate
from wms_api.schemas.carrier import CarrierCreate
from wms_api.schemas.employee import EmployeeCreate
from wms_api.schemas.inbound_order import InboundOrderCreate
from wms_api.schemas.locality import LocalityCreate
from wms_api.schemas.product import ProductCreate, ProductRecordCreate
from wms_api.schemas.purchase_order import PurchaseOrderCreate
from wms_api.schemas.section import SectionCreate
from wms_api.schemas.seller import SellerCreate
from wms_api.schemas.warehouse import WarehouseCreate


def make_repo(repo_cls):
    """Autospec double of a repository: keys are free, references exist.

    Tests flip individual probes to drive the failure paths.
    """
    repo = create_autospec(repo_cls, instance=True)
    repo.exists.return_value = False
    for name in dir(repo_cls):
        if name.endswith("_exists"):
            getattr(repo, name).return_value = True
    return repo


def locality(**overrides):
    data = dict(postal_code=1000, locality_name="Palermo", province_name="Buenos Aires", country_name="Argentina")
    data.update(overrides)
    return LocalityCreate(**data)


def seller(**overrides):
    data = dict(cid=10, company_name="Acme", address="Main 1", telephone="555-0100", locality_id=1)
    data.update(overrides)
    return SellerCreate(**data)


def product(**overrides):
    data = dict(
        description="Frozen peas", expiration_rate=0.5, freezing_rate=0.3, height=10.0,
        length=20.0, netweight=1.5, product_code="PEA-1", recommended_freezing_temperature=-18.0,
        width=15.0, product_type_id=3, seller_id=1,
    )
    data.update(overrides)
    return ProductCreate(**data)


def product_record(**overrides):
    data = dict(last_update_date=date(2024, 3, 1), purchase_price=10.0, sale_price=14.5, product_id=1)
    data.update(overrides)
    return ProductRecordCreate(**data)


def warehouse(**overrides):
    data = dict(address="Dock 4", telephone="555-0199", warehouse_code="WH-01", minimum_capacity=10, minimum_temperature=-5)
    data.update(overrides)
    return WarehouseCreate(**data)


def section(**overrides):
    data = dict(
        section_number=1, current_temperature=2, minimum_temperature=-4, current_capacity=30,
        minimum_capacity=5, maximum_capacity=100, warehouse_id=1, product_type_id=3,
    )
    data.update(overrides)
    return SectionCreate(**data)


def employee(**overrides):
    data = dict(card_number_id="E-100", first_name="Ana", last_name="Diaz", warehouse_id=1)
    data.update(overrides)
    return EmployeeCreate(**data)


def batch(**overrides):
    data = dict(
        batch_number=500, current_quantity=40, current_temperature=-10, due_date=date(2025, 1, 31),
        initial_quantity=50, manufacturing_date=date(2024, 1, 2), manufacturing_hour=8,
        minimum_temperature=-20, product_id=1, section_id=1,
    )
    data.update(overrides)
    return ProductBatchCreate(**data)


def inbound_order(**overrides):
    data = dict(order_date=date(2024, 5, 6), order_number="IN-1", employee_id=1, product_batch_id=1, warehouse_id=1)
    data.update(overrides)
    return InboundOrderCreate(**data)


def carrier(**overrides):
    data = dict(cid="CAR-1", company_name="FastShip", address="Route 9", telephone="555-0142", locality_id=1)
    data.update(overrides)
    return CarrierCreate(**data)


def purchase_order(**overrides):
    data = dict(order_number="PO-1", order_date=date(2024, 6, 1), tracking_code="TRK1", buyer_id=1, product_record_id=1)
    data.update(overrides)
    return PurchaseOrderCreate(**data)
