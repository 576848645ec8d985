"""Tests for contact messages, product suggestions and society requests."""

import pytest

from freshcart.services.enquiry_service import EnquiryService
from freshcart.services.errors import NotFoundError


class TestContactSubmissions:
    def test_submit_and_list(self, db):
        svc = EnquiryService(db)

        submission = svc.submit_contact(
            {"name": "Asha", "email": "asha@example.com", "phone": None, "message": "Weekend delivery?"}
        )

        assert submission.id
        assert [s.id for s in svc.list_contact_submissions()] == [submission.id]


class TestProductSuggestions:
    @pytest.fixture
    def suggestion(self, db):
        return EnquiryService(db).suggest_product({"suggested_product_name": "Dragon fruit"})

    def test_new_suggestion_is_pending(self, suggestion):
        assert suggestion.status == "pending"
        assert suggestion.admin_notes is None

    def test_status_update(self, db, suggestion):
        svc = EnquiryService(db)
        assert svc.update_suggestion_status(suggestion.id, "implemented").status == "implemented"
        with pytest.raises(ValueError):
            svc.update_suggestion_status(suggestion.id, "someday")

    def test_notes_update(self, db, suggestion):
        updated = EnquiryService(db).update_suggestion_notes(suggestion.id, "seasonal only")
        assert updated.admin_notes == "seasonal only"

    def test_missing_suggestion(self, db):
        svc = EnquiryService(db)
        with pytest.raises(NotFoundError):
            svc.update_suggestion_status("missing", "reviewed")
        with pytest.raises(NotFoundError):
            svc.delete_suggestion("missing")

    def test_delete(self, db, suggestion):
        svc = EnquiryService(db)
        svc.delete_suggestion(suggestion.id)
        assert svc.list_suggestions() == []


class TestSocietyRequests:
    def test_request_list_and_delete(self, db):
        svc = EnquiryService(db)
        request = svc.request_society({"name": "Meera", "society_name": "Palm Grove", "phone": "9876500000"})

        assert [r.society_name for r in svc.list_society_requests()] == ["Palm Grove"]

        svc.delete_society_request(request.id)
        assert svc.list_society_requests() == []
        with pytest.raises(NotFoundError):
            svc.delete_society_request(request.id)
