from datetime import date

import pytest

from condofee.constants import UNPAID_STATUS
from condofee.models.payment import Payment


@pytest.fixture()
def fee_in_db(fee_repo, sample_fee):
    return fee_repo.create(sample_fee())


def _payment(fee, resident, **overrides) -> Payment:
    defaults = dict(fee_id=fee.id, resident_id=resident.id, quantity=80, amount_paid=400000)
    defaults.update(overrides)
    return Payment(**defaults)


class TestPaymentRepoCRUD:
    def test_create_unpaid(self, payment_repo, fee_in_db, resident_in_db):
        created = payment_repo.create(_payment(fee_in_db, resident_in_db))

        assert created.id is not None
        assert len(created.uuid) == 26
        assert created.status == UNPAID_STATUS
        assert created.date_paid is None

    def test_date_paid_round_trips(self, payment_repo, fee_in_db, resident_in_db):
        created = payment_repo.create(
            _payment(fee_in_db, resident_in_db, status="cash", date_paid=date(2024, 1, 5))
        )
        assert payment_repo.get_by_id(created.id).date_paid == date(2024, 1, 5)

    def test_get_by_id_not_found(self, payment_repo):
        assert payment_repo.get_by_id(9999) is None

    def test_update(self, payment_repo, fee_in_db, resident_in_db):
        created = payment_repo.create(_payment(fee_in_db, resident_in_db))
        created.status = "transfer"
        created.date_paid = date(2024, 2, 1)
        created.quantity = 3

        updated = payment_repo.update(created)

        assert updated.status == "transfer"
        assert updated.date_paid == date(2024, 2, 1)
        assert updated.quantity == 3

    def test_delete(self, payment_repo, fee_in_db, resident_in_db):
        created = payment_repo.create(_payment(fee_in_db, resident_in_db))
        payment_repo.delete(created.id)
        assert payment_repo.get_by_id(created.id) is None

    def test_list_by_fee_and_resident(self, payment_repo, fee_repo, sample_fee, fee_in_db, resident_in_db):
        other_fee = fee_repo.create(sample_fee(month=2))
        payment_repo.create(_payment(fee_in_db, resident_in_db))
        payment_repo.create(_payment(other_fee, resident_in_db))

        assert len(payment_repo.list_by_fee(fee_in_db.id)) == 1
        assert len(payment_repo.list_by_resident(resident_in_db.id)) == 2
        assert len(payment_repo.list_all()) == 2

    def test_search(self, payment_repo, fee_in_db, resident_in_db):
        payment_repo.create(_payment(fee_in_db, resident_in_db, status="cash", date_paid=date(2024, 1, 5)))
        payment_repo.create(_payment(fee_in_db, resident_in_db))

        assert len(payment_repo.search("CASH")) == 1
        assert len(payment_repo.search("service")) == 2
        assert len(payment_repo.search("nguyen")) == 2
        assert payment_repo.search("nothing-matches") == []
