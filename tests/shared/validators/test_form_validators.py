"""Tests for whole-form validation."""

from src.features.auth.schemas import LoginFormData
from src.shared.validators.forms import has_form_errors, validate_login_form, validate_signup_form
from src.shared.validators.password import validate_password


class TestLoginFormValidation:
    def test_empty_form_reports_both_fields(self):
        errors = validate_login_form(LoginFormData(username="", password=""))
        assert errors == {"username": "Username is required", "password": "Password is required"}
        assert has_form_errors(errors) is True

    def test_valid_form_has_no_errors(self, make_login_form):
        errors = validate_login_form(make_login_form())
        assert errors == {}
        assert has_form_errors(errors) is False

    def test_password_strength_not_checked_at_login(self, make_login_form):
        """Test a weak but present password is accepted at login."""
        assert validate_login_form(make_login_form(password="x")) == {}

    def test_only_failing_fields_are_reported(self, make_login_form):
        errors = validate_login_form(make_login_form(username="ab"))
        assert errors == {"username": "Username must be at least 3 characters long"}

    def test_missing_password_message_matches_sign_up(self, make_login_form):
        errors = validate_login_form(make_login_form(password=""))
        assert errors == {"password": validate_password("")}


class TestSignUpFormValidation:
    def test_well_formed_form_has_no_errors(self, make_signup_form):
        errors = validate_signup_form(make_signup_form())
        assert errors == {}
        assert has_form_errors(errors) is False

    def test_empty_form_reports_every_field(self, make_signup_form):
        errors = validate_signup_form(
            make_signup_form(name="", username="", email="", phone="", password="", confirmPassword="")
        )
        assert errors == {
            "name": "Name is required",
            "username": "Username is required",
            "email": "Email is required",
            "phone": "Phone number is required",
            "password": "Password is required",
            "confirmPassword": "Please confirm your password",
        }

    def test_password_checked_against_username(self, make_signup_form):
        errors = validate_signup_form(
            make_signup_form(username="jane", password="MyJane123", confirmPassword="MyJane123")
        )
        assert errors == {"password": "Password cannot contain your username"}

    def test_confirmation_checked_against_password(self, make_signup_form):
        errors = validate_signup_form(make_signup_form(confirmPassword="Secure123?"))
        assert errors == {"confirmPassword": "Passwords do not match"}

    def test_fields_are_validated_independently(self, make_signup_form):
        errors = validate_signup_form(make_signup_form(email="bad-email", phone="12345"))
        assert set(errors) == {"email", "phone"}

    def test_does_not_mutate_input(self, make_signup_form):
        form = make_signup_form(name="  Jane  ")
        before = form.model_dump()
        validate_signup_form(form)
        assert form.model_dump() == before


class TestHasFormErrors:
    def test_empty_mapping(self):
        assert has_form_errors({}) is False

    def test_any_key_counts(self):
        assert has_form_errors({"name": "Name is required"}) is True
