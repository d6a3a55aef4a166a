import pytest
from conftest import make_signup

from studio.domain.auth.model.signup import SignupForm
from studio.domain.shared.error import ValidationError


class TestSignupSteps:
    def test_complete_form_is_valid(self) -> None:
        form = make_signup()
        for step in (1, 2, 3, 4):
            assert form.step_errors(step) == {}
        form.validate_all()

    def test_step_one_requires_names_and_email(self) -> None:
        errors = SignupForm().step_errors(1)
        assert set(errors) == {"first_name", "last_name", "email"}

    def test_step_one_rejects_bad_email(self) -> None:
        errors = make_signup(email="not-an-email").step_errors(1)
        assert errors == {"email": "Please enter a valid email address"}

    def test_step_two_requires_interest_and_goal(self) -> None:
        errors = make_signup(interests=[], primary_goal="").step_errors(2)
        assert set(errors) == {"interests", "primary_goal"}

    def test_validate_step_itemises_errors(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_signup(role="", experience="").validate_step(3)
        assert set(exc_info.value.errors) == {"role", "experience"}
        assert exc_info.value.field == "role"

    def test_step_five_is_optional(self) -> None:
        assert make_signup(communication_preference="", timezone="").step_errors(5) == {}

    def test_display_name(self) -> None:
        assert make_signup().display_name == "Ada Lovelace"
