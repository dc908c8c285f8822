"""Repositories against an in-memory SQLite database."""

import pytest
from sqlalchemy import text

from wms_api.exceptions import DuplicateError, NotFoundError, PersistenceError
from wms_api.repositories.batch import ProductBatchRepository
from wms_api.repositories.buyer import BuyerRepository
from wms_api.repositories.carrier import CarrierRepository
from wms_api.repositories.employee import EmployeeRepository
from wms_api.repositories.inbound_order import InboundOrderRepository
from wms_api.repositories.locality import LocalityRepository
from wms_api.repositories.product import ProductRepository
from wms_api.repositories.purchase_order import PurchaseOrderRepository
from wms_api.repositories.section import SectionRepository
from wms_api.repositories.seller import SellerRepository
from wms_api.repositories.warehouse import WarehouseRepository
from wms_api.schemas.buyer import BuyerCreate
from wms_api.schemas.seller import SellerOut
from tests.fakes import (
    batch, carrier, employee, inbound_order, locality, product, product_record,
    purchase_order, section, seller, warehouse,
)


def _seed_catalog(db):
    """Locality -> seller -> product, warehouse -> section; returns their ids."""
    loc_id = LocalityRepository(db).save(locality())
    seller_id = SellerRepository(db).save(seller(locality_id=loc_id))
    product_id = ProductRepository(db).save(product(seller_id=seller_id))
    wh_id = WarehouseRepository(db).save(warehouse())
    section_id = SectionRepository(db).save(section(warehouse_id=wh_id))
    return loc_id, seller_id, product_id, wh_id, section_id


class TestGenericOperations:

    def test_save_then_get(self, db):
        repo = LocalityRepository(db)
        new_id = repo.save(locality())

        stored = repo.get(new_id)

        assert stored.id == new_id
        assert stored.model_dump(exclude={"id"}) == locality().model_dump()

    def test_get_missing_raises_not_found(self, db):
        with pytest.raises(NotFoundError):
            BuyerRepository(db).get(404)

    def test_get_all_empty_table(self, db):
        assert SellerRepository(db).get_all() == []

    def test_get_all_ordered_by_id(self, db):
        repo = BuyerRepository(db)
        repo.save(BuyerCreate(card_number_id="B-2", first_name="Zoe", last_name="Ng"))
        repo.save(BuyerCreate(card_number_id="B-1", first_name="Al", last_name="Li"))

        assert [b.card_number_id for b in repo.get_all()] == ["B-2", "B-1"]

    def test_exists_by_business_key(self, db):
        repo = LocalityRepository(db)
        repo.save(locality(postal_code=2000))

        assert repo.exists(2000) is True
        assert repo.exists(3000) is False

    def test_delete_missing_raises_not_found(self, db):
        with pytest.raises(NotFoundError):
            WarehouseRepository(db).delete(55)

    def test_update_overwrites_row(self, db):
        loc_id = LocalityRepository(db).save(locality())
        repo = SellerRepository(db)
        seller_id = repo.save(seller(locality_id=loc_id))

        changed = SellerOut(id=seller_id, **seller(locality_id=loc_id, company_name="Renamed").model_dump())
        repo.update(changed)

        assert repo.get(seller_id).company_name == "Renamed"

    def test_reference_probes(self, db):
        loc_id, seller_id, product_id, wh_id, section_id = _seed_catalog(db)
        repo = ProductBatchRepository(db)

        assert repo.product_exists(product_id)
        assert repo.section_exists(section_id)
        assert not repo.product_exists(product_id + 100)


class TestUniqueConstraintGuard:

    def test_insert_of_taken_key_surfaces_as_duplicate(self, db):
        repo = BuyerRepository(db)
        repo.save(BuyerCreate(card_number_id="B-1", first_name="Al", last_name="Li"))

        with pytest.raises(DuplicateError) as exc:
            repo.save(BuyerCreate(card_number_id="B-1", first_name="Other", last_name="Person"))

        assert exc.value.field == "card_number_id"
        # session is usable again after the rollback
        assert len(repo.get_all()) == 1

    def test_update_onto_another_rows_key(self, db):
        loc_id = LocalityRepository(db).save(locality())
        repo = SellerRepository(db)
        repo.save(seller(cid=1, locality_id=loc_id))
        second = repo.save(seller(cid=2, locality_id=loc_id))

        with pytest.raises(DuplicateError):
            repo.update(SellerOut(id=second, **seller(cid=1, locality_id=loc_id).model_dump()))


class TestSectionDelete:

    def test_delete_removes_dependent_batches(self, db):
        _, _, product_id, _, section_id = _seed_catalog(db)
        batches = ProductBatchRepository(db)
        batches.save(batch(batch_number=1, product_id=product_id, section_id=section_id))
        batches.save(batch(batch_number=2, product_id=product_id, section_id=section_id))

        SectionRepository(db).delete(section_id)

        assert batches.get_all() == []
        with pytest.raises(NotFoundError):
            SectionRepository(db).get(section_id)

    def test_delete_unknown_section_keeps_batches(self, db):
        _, _, product_id, _, section_id = _seed_catalog(db)
        batches = ProductBatchRepository(db)
        batches.save(batch(product_id=product_id, section_id=section_id))

        with pytest.raises(NotFoundError):
            SectionRepository(db).delete(section_id + 100)

        assert len(batches.get_all()) == 1


class TestReports:

    def test_sellers_per_locality_includes_empty(self, db):
        loc_id, _, _, _, _ = _seed_catalog(db)
        empty_id = LocalityRepository(db).save(locality(postal_code=9999, locality_name="Empty"))

        report = LocalityRepository(db).report_sellers()

        counts = {r.locality_id: r.sellers_count for r in report}
        assert counts == {loc_id: 1, empty_id: 0}

    def test_sellers_report_filtered(self, db):
        loc_id, _, _, _, _ = _seed_catalog(db)

        report = LocalityRepository(db).report_sellers(loc_id)

        assert len(report) == 1
        assert report[0].postal_code == 1000

    def test_carriers_per_locality(self, db):
        loc_id = LocalityRepository(db).save(locality())
        CarrierRepository(db).save(carrier(cid="C1", locality_id=loc_id))
        CarrierRepository(db).save(carrier(cid="C2", locality_id=loc_id))

        report = CarrierRepository(db).report_by_locality(loc_id)

        assert report[0].carriers_count == 2

    def test_records_per_product(self, db):
        _, _, product_id, _, _ = _seed_catalog(db)
        repo = ProductRepository(db)
        record_id = repo.save_record(product_record(product_id=product_id))
        repo.save_record(product_record(product_id=product_id, sale_price=20.0))

        assert repo.get_record(record_id).product_id == product_id
        assert repo.report_records()[0].records_count == 2

    def test_get_record_missing(self, db):
        with pytest.raises(NotFoundError):
            ProductRepository(db).get_record(1)

    def test_products_per_section_sums_quantities(self, db):
        _, _, product_id, wh_id, section_id = _seed_catalog(db)
        empty_section = SectionRepository(db).save(section(section_number=2, warehouse_id=wh_id))
        batches = ProductBatchRepository(db)
        batches.save(batch(batch_number=1, current_quantity=40, product_id=product_id, section_id=section_id))
        batches.save(batch(batch_number=2, current_quantity=15, product_id=product_id, section_id=section_id))

        report = SectionRepository(db).report_products()

        counts = {r.section_id: r.products_count for r in report}
        assert counts == {section_id: 55, empty_section: 0}

    def test_inbound_orders_per_employee(self, db):
        _, _, product_id, wh_id, section_id = _seed_catalog(db)
        emp_id = EmployeeRepository(db).save(employee(warehouse_id=wh_id))
        idle_id = EmployeeRepository(db).save(employee(card_number_id="E-200", warehouse_id=wh_id))
        batch_id = ProductBatchRepository(db).save(batch(product_id=product_id, section_id=section_id))
        orders = InboundOrderRepository(db)
        orders.save(inbound_order(order_number="IN-1", employee_id=emp_id, warehouse_id=wh_id, product_batch_id=batch_id))
        orders.save(inbound_order(order_number="IN-2", employee_id=emp_id, warehouse_id=wh_id, product_batch_id=batch_id))

        report = orders.report_by_employee()

        counts = {r.id: r.inbound_orders_count for r in report}
        assert counts == {emp_id: 2, idle_id: 0}

    def test_purchase_orders_per_buyer(self, db):
        _, _, product_id, _, _ = _seed_catalog(db)
        buyer_id = BuyerRepository(db).save(BuyerCreate(card_number_id="B-1", first_name="Al", last_name="Li"))
        record_id = ProductRepository(db).save_record(product_record(product_id=product_id))
        orders = PurchaseOrderRepository(db)
        orders.save(purchase_order(buyer_id=buyer_id, product_record_id=record_id))

        report = orders.report_by_buyer(buyer_id)

        assert report[0].purchase_orders_count == 1
        assert report[0].card_number_id == "B-1"


class TestStoreFailures:

    def _break_localities(self, db):
        db.execute(text("DROP TABLE localities"))
        db.commit()

    def test_probes_report_absent_instead_of_raising(self, db):
        repo = LocalityRepository(db)
        repo.save(locality(postal_code=1000))
        self._break_localities(db)

        assert repo.exists(1000) is False
        assert repo.locality_exists(1) is False
        assert SellerRepository(db).locality_exists(1) is False

    def test_reads_raise_persistence_error(self, db):
        self._break_localities(db)
        repo = LocalityRepository(db)

        with pytest.raises(PersistenceError):
            repo.get_all()
        with pytest.raises(PersistenceError):
            repo.get(1)
        with pytest.raises(PersistenceError):
            repo.report_sellers()

    def test_failed_insert_is_persistence_error(self, db):
        self._break_localities(db)

        with pytest.raises(PersistenceError) as exc:
            LocalityRepository(db).save(locality())

        assert exc.value.code == "PERSISTENCE_FAILURE"
        assert exc.value.details["operation"] == "save"
