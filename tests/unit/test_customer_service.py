"""
Customer service tests against the seed store.

Run with: pytest tests/unit/test_customer_service.py -v
"""

import pytest

from models.customer import HealthSegment
from models.query import CustomerQuery, SortField, SortOrder
from repositories.customer_store import CustomerStore
from services.customer_service import CustomerService
from utils.error_handling import NotFoundError


class TestQueryCustomers:
    """End-to-end list scenarios."""

    def test_default_query_returns_first_page_by_name(self, customer_service):
        page = customer_service.query_customers(CustomerQuery())
        names = [c.name for c in page.data]
        assert len(names) == 20
        assert names[0] == "Acme Corporation"
        assert names[-1] == "Zenith Solutions"
        assert names.index("NextGen Analytics") < names.index("Nexus Networks")
        assert page.pagination.total_pages == 1

    def test_at_risk_segment(self, customer_service, seed_store):
        query = CustomerQuery(segment=HealthSegment.AT_RISK, page=1, page_size=20)
        page = customer_service.query_customers(query)

        expected = {c.id for c in seed_store.list_all() if c.health_score < 50}
        assert {c.id for c in page.data} == expected
        assert expected == {"3", "6", "10", "13", "16", "19"}
        assert page.pagination.total == len(expected)
        assert page.pagination.total_pages == 1

    def test_top_five_by_mrr(self, customer_service):
        query = CustomerQuery(sort_by=SortField.MRR, sort_order=SortOrder.DESC, page_size=5)
        page = customer_service.query_customers(query)

        mrrs = [c.mrr for c in page.data]
        assert [c.id for c in page.data] == ["9", "20", "14", "3", "7"]
        assert mrrs == sorted(mrrs, reverse=True)
        assert page.pagination.total == 20
        assert page.pagination.total_pages == 4

    def test_search_acme(self, customer_service):
        page = customer_service.query_customers(CustomerQuery(search="acme"))
        assert [c.name for c in page.data] == ["Acme Corporation"]

    def test_search_trailing_space_is_significant(self, customer_service):
        """A trailing space in the search is matched literally."""
        page = customer_service.query_customers(CustomerQuery(search="ion "))
        assert [c.name for c in page.data] == ["Innovation Labs"]

    def test_page_beyond_end(self, customer_service):
        page = customer_service.query_customers(CustomerQuery(page=5, page_size=6))
        assert page.data == ()
        assert page.pagination.total == 20
        assert page.pagination.total_pages == 4

    def test_most_recently_active_first(self, customer_service):
        query = CustomerQuery(sort_by=SortField.LAST_ACTIVE, sort_order=SortOrder.DESC, page_size=1)
        assert customer_service.query_customers(query).data[0].name == "NextGen Analytics"

    def test_idempotent(self, customer_service):
        query = CustomerQuery(search="ventures", sort_by=SortField.HEALTH_SCORE)
        first = customer_service.query_customers(query)
        second = customer_service.query_customers(query)
        assert first.model_dump_json() == second.model_dump_json()
        assert [c.id for c in first.data] == ["13", "19"]

    def test_injected_store_is_used(self, make_customer):
        service = CustomerService(store=CustomerStore([make_customer("only")]))
        page = service.query_customers(CustomerQuery())
        assert [c.id for c in page.data] == ["only"]


class TestGetCustomerHealthDetail:
    def test_known_customer(self, customer_service):
        detail = customer_service.get_customer_health_detail("1")
        assert detail.id == "1"
        assert detail.health_score == 95
        assert detail.recent_events

    def test_repeat_calls_are_equal(self, customer_service):
        assert customer_service.get_customer_health_detail(
            "12"
        ) == customer_service.get_customer_health_detail("12")

    def test_unknown_customer_raises(self, customer_service):
        with pytest.raises(NotFoundError):
            customer_service.get_customer_health_detail("does-not-exist")

    def test_defaults_to_seed_store(self):
        assert len(CustomerService().store) == 20
