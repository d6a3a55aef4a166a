"""Local signup form: the data behind the local pseudo-identity."""

import re

from pydantic import BaseModel

from studio.domain.shared.error import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

SIGNUP_STEPS = (1, 2, 3, 4)


class SignupForm(BaseModel):
    """Multi-step community signup.

    Steps: 1 personal info, 2 interests, 3 professional info, 4 goals.
    Step 5 preferences are optional.
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""

    interests: list[str] = []
    primary_goal: str = ""

    role: str = ""
    company: str = ""
    experience: str = ""
    team_size: str = ""

    challenges: list[str] = []
    newsletter: bool = False
    updates: bool = False
    community_access: bool = True

    communication_preference: str = ""
    timezone: str = ""

    def step_errors(self, step: int) -> dict[str, str]:
        """Per-field errors for one step; empty when the step is valid."""
        errors: dict[str, str] = {}
        if step == 1:
            if not self.first_name.strip():
                errors["first_name"] = "First name is required"
            if not self.last_name.strip():
                errors["last_name"] = "Last name is required"
            if not self.email.strip():
                errors["email"] = "Email is required"
            elif not EMAIL_PATTERN.match(self.email):
                errors["email"] = "Please enter a valid email address"
        elif step == 2:
            if not self.interests:
                errors["interests"] = "Please select at least one interest"
            if not self.primary_goal:
                errors["primary_goal"] = "Please select your primary goal"
        elif step == 3:
            if not self.role:
                errors["role"] = "Please select your role"
            if not self.experience:
                errors["experience"] = "Please select your experience level"
        elif step == 4:
            if not self.challenges:
                errors["challenges"] = "Please select at least one challenge"
        return errors

    def validate_step(self, step: int) -> None:
        errors = self.step_errors(step)
        if errors:
            raise ValidationError(f"Signup step {step} is incomplete", errors=errors)

    def validate_all(self) -> None:
        errors: dict[str, str] = {}
        for step in SIGNUP_STEPS:
            errors.update(self.step_errors(step))
        if errors:
            raise ValidationError("Signup form is incomplete", errors=errors)

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
