# freshcart/repos/enquiry_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from freshcart.data.models.contact_submission import ContactSubmissionModel
from freshcart.data.models.product_suggestion import ProductSuggestionModel
from freshcart.data.models.society_request import SocietyRequestModel


class ContactRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_submission(self, submission: ContactSubmissionModel) -> ContactSubmissionModel:
        self.db.add(submission)
        self.db.commit()
        self.db.refresh(submission)
        return submission

    def list_submissions(self) -> List[ContactSubmissionModel]:
        stmt = select(ContactSubmissionModel).order_by(ContactSubmissionModel.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())


class SuggestionRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_suggestion(self, suggestion: ProductSuggestionModel) -> ProductSuggestionModel:
        self.db.add(suggestion)
        self.db.commit()
        self.db.refresh(suggestion)
        return suggestion

    def get_suggestion(self, suggestion_id: str) -> ProductSuggestionModel | None:
        return self.db.get(ProductSuggestionModel, suggestion_id)

    def list_suggestions(self) -> List[ProductSuggestionModel]:
        stmt = select(ProductSuggestionModel).order_by(ProductSuggestionModel.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def save(self, suggestion: ProductSuggestionModel) -> ProductSuggestionModel:
        self.db.commit()
        self.db.refresh(suggestion)
        return suggestion

    def delete_suggestion(self, suggestion_id: str) -> bool:
        suggestion = self.get_suggestion(suggestion_id)
        if not suggestion:
            return False
        self.db.delete(suggestion)
        self.db.commit()
        return True


class SocietyRequestRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_request(self, request: SocietyRequestModel) -> SocietyRequestModel:
        self.db.add(request)
        self.db.commit()
        self.db.refresh(request)
        return request

    def list_requests(self) -> List[SocietyRequestModel]:
        stmt = select(SocietyRequestModel).order_by(SocietyRequestModel.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def delete_request(self, request_id: str) -> bool:
        request = self.db.get(SocietyRequestModel, request_id)
        if not request:
            return False
        self.db.delete(request)
        self.db.commit()
        return True
