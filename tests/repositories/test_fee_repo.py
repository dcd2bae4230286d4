from condofee.models.fee import FeeType


class TestFeeRepoCRUD:
    def test_create_and_get(self, fee_repo, sample_fee):
        created = fee_repo.create(sample_fee())

        assert created.id is not None
        assert len(created.uuid) == 26
        assert created.fee_type == FeeType.AREA
        assert created.amount == 5000
        assert created.period == "2024-01"
        assert created.compulsory is True
        assert created.created_at is not None

    def test_get_by_id_not_found(self, fee_repo):
        assert fee_repo.get_by_id(9999) is None

    def test_get_by_uuid(self, fee_repo, sample_fee):
        created = fee_repo.create(sample_fee())
        assert fee_repo.get_by_uuid(created.uuid).id == created.id
        assert fee_repo.get_by_uuid("nonexistent") is None

    def test_list_all_newest_period_first(self, fee_repo, sample_fee):
        fee_repo.create(sample_fee(month=1))
        fee_repo.create(sample_fee(month=3))
        fee_repo.create(sample_fee(year=2023, month=12))
        assert [f.period for f in fee_repo.list_all()] == ["2024-03", "2024-01", "2023-12"]

    def test_list_by_period(self, fee_repo, sample_fee):
        fee_repo.create(sample_fee(month=1))
        fee_repo.create(sample_fee(month=2, fee_type=FeeType.VEHICLE))
        result = fee_repo.list_by_period(2024, 2)
        assert len(result) == 1
        assert result[0].fee_type == FeeType.VEHICLE

    def test_search_by_type(self, fee_repo, sample_fee):
        fee_repo.create(sample_fee(fee_type=FeeType.AREA))
        fee_repo.create(sample_fee(fee_type=FeeType.PER_UNIT))
        assert [f.fee_type for f in fee_repo.search_by_type("PER")] == [FeeType.PER_UNIT]

    def test_update(self, fee_repo, sample_fee):
        created = fee_repo.create(sample_fee())
        created.amount = 6000
        created.description = "Service charge (revised)"
        created.compulsory = False

        updated = fee_repo.update(created)

        assert updated.amount == 6000
        assert updated.description == "Service charge (revised)"
        assert updated.compulsory is False

    def test_delete_removes_payments(self, fee_repo, payment_repo, resident_in_db, sample_fee):
        from condofee.models.payment import Payment

        fee = fee_repo.create(sample_fee())
        payment_repo.create(Payment(fee_id=fee.id, resident_id=resident_in_db.id, quantity=1))

        fee_repo.delete(fee.id)

        assert fee_repo.get_by_id(fee.id) is None
        assert payment_repo.list_by_fee(fee.id) == []
