"""Email template related Pydantic schemas."""

from pydantic import BaseModel, Field


class EmailTemplateData(BaseModel):
    """An email template as shown to the account owner."""

    subject: str
    message: str
    sender_email: str = ""
    sender_name: str = ""


class LostPasswordForm(BaseModel):
    """Raw fields of the lost password templates form."""

    subject1: str = Field("", description="Activation email subject")
    message1: str = Field("", description="Activation email message")
    subject2: str = Field("", description="Lost password email subject")
    message2: str = Field("", description="Lost password email message")


class LostPasswordPage(BaseModel):
    """Values rendered into the lost password templates form."""

    subject1: str
    message1: str
    subject2: str
    message2: str
    sender_email: str
    sender_name: str

    @classmethod
    def from_templates(
        cls,
        activation: EmailTemplateData,
        lost_password: EmailTemplateData,
    ) -> "LostPasswordPage":
        """Build page values; sender fields come from the activation template."""
        return cls(
            subject1=activation.subject,
            message1=activation.message,
            subject2=lost_password.subject,
            message2=lost_password.message,
            sender_email=activation.sender_email,
            sender_name=activation.sender_name,
        )
