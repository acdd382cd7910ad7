"""Rejection rule and insurance provider schemas."""

from pydantic import BaseModel

from .common import RejectionCategory, RuleSeverity


class RejectionRule(BaseModel):
    """A configured pattern mapping rejection narratives and codes to a category."""

    id: str
    name: str
    name_ar: str = ""
    description: str = ""
    description_ar: str = ""
    category: RejectionCategory
    subcategory: str
    subcategory_ar: str = ""
    keywords: list[str] = []
    keywords_ar: list[str] = []
    codes: list[str] = []
    severity: RuleSeverity = RuleSeverity.MEDIUM
    auto_fix: bool = False
    fix_suggestion: str = ""
    fix_suggestion_ar: str = ""
    provider_id: str | None = None
    provider_specific: bool = False
    is_active: bool = True

    @property
    def all_keywords(self) -> list[str]:
        """English and Arabic keywords as one list."""
        return [*self.keywords, *self.keywords_ar]


class CustomCategories(BaseModel):
    """Provider-defined labels for medical and technical rejections."""

    medical: list[str] = []
    technical: list[str] = []


class InsuranceProvider(BaseModel):
    """An insurance provider and the rules that apply only to its claims."""

    id: str
    name: str
    name_ar: str = ""
    code: str = ""
    specific_rules: list[RejectionRule] = []
    custom_categories: CustomCategories = CustomCategories()
    custom_categories_ar: CustomCategories = CustomCategories()
    is_active: bool = True
