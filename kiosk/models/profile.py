"""
Requester profile model
"""
from pydantic import BaseModel


class Profile(BaseModel):
    """
    Personal and academic details of the person making the request.

    The identifier is assigned from the verified session and is never edited
    afterwards; the remaining fields are confirmed in the profile stage.
    """
    identifier: str = ""
    name: str = ""
    course: str = ""
    year: str = ""
    contact_number: str = ""
    email: str = ""

    def is_empty(self) -> bool:
        return not self.identifier
