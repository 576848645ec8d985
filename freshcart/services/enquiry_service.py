# freshcart/services/enquiry_service.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from freshcart.data.models._columns import utcnow
from freshcart.data.models.contact_submission import ContactSubmissionModel
from freshcart.data.models.product_suggestion import ProductSuggestionModel
from freshcart.data.models.society_request import SocietyRequestModel
from freshcart.domain.enums import SuggestionStatus
from freshcart.repos.enquiry_repo import ContactRepo, SocietyRequestRepo, SuggestionRepo
from freshcart.services.errors import NotFoundError
from freshcart.utils.logging import get_logger

logger = get_logger(__name__)


class EnquiryService:
    """
    Messages from shoppers: contact form, product suggestions and requests
    to deliver to a new society. Shoppers only submit; admins read and
    manage them.
    """

    def __init__(self, db: Session):
        self.contacts = ContactRepo(db)
        self.suggestions = SuggestionRepo(db)
        self.society_requests = SocietyRequestRepo(db)

    # contact form
    def submit_contact(self, data: Dict[str, Any]) -> ContactSubmissionModel:
        submission = self.contacts.create_submission(
            ContactSubmissionModel(
                name=data["name"],
                email=data["email"],
                phone=data.get("phone"),
                message=data["message"],
            )
        )
        logger.info(f"Contact submission {submission.id} received")
        return submission

    def list_contact_submissions(self) -> List[ContactSubmissionModel]:
        return self.contacts.list_submissions()

    # product suggestions
    def suggest_product(self, data: Dict[str, Any]) -> ProductSuggestionModel:
        suggestion = self.suggestions.create_suggestion(
            ProductSuggestionModel(
                suggested_product_name=data["suggested_product_name"],
                product_description=data.get("product_description"),
                suggested_category=data.get("suggested_category"),
                user_email=data.get("user_email"),
                status=SuggestionStatus.PENDING.value,
            )
        )
        logger.info(f"Product suggestion {suggestion.id}: {suggestion.suggested_product_name}")
        return suggestion

    def list_suggestions(self) -> List[ProductSuggestionModel]:
        return self.suggestions.list_suggestions()

    def update_suggestion_status(self, suggestion_id: str, status: str) -> ProductSuggestionModel:
        try:
            status = SuggestionStatus(status).value
        except ValueError:
            raise ValueError(f"Unknown suggestion status: {status}")

        suggestion = self._get_suggestion(suggestion_id)
        suggestion.status = status
        suggestion.updated_at = utcnow()
        return self.suggestions.save(suggestion)

    def update_suggestion_notes(self, suggestion_id: str, admin_notes: str | None) -> ProductSuggestionModel:
        suggestion = self._get_suggestion(suggestion_id)
        suggestion.admin_notes = admin_notes
        suggestion.updated_at = utcnow()
        return self.suggestions.save(suggestion)

    def delete_suggestion(self, suggestion_id: str) -> None:
        if not self.suggestions.delete_suggestion(suggestion_id):
            raise NotFoundError(f"Suggestion {suggestion_id} not found")

    def _get_suggestion(self, suggestion_id: str) -> ProductSuggestionModel:
        suggestion = self.suggestions.get_suggestion(suggestion_id)
        if not suggestion:
            raise NotFoundError(f"Suggestion {suggestion_id} not found")
        return suggestion

    # society requests
    def request_society(self, data: Dict[str, Any]) -> SocietyRequestModel:
        request = self.society_requests.create_request(
            SocietyRequestModel(
                name=data["name"],
                society_name=data["society_name"],
                phone=data["phone"],
            )
        )
        logger.info(f"Delivery requested for society {request.society_name}")
        return request

    def list_society_requests(self) -> List[SocietyRequestModel]:
        return self.society_requests.list_requests()

    def delete_society_request(self, request_id: str) -> None:
        if not self.society_requests.delete_request(request_id):
            raise NotFoundError(f"Society request {request_id} not found")
