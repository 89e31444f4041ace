"""
Tests for binding submitted owner forms
"""
from core.validation import BindingResult, bind_owner_form

VALID_FORM = {
    "firstName": "Joe",
    "lastName": "Bloggs",
    "address": "123 Caramel Street",
    "city": "London",
    "telephone": "1316761638",
}


def test_valid_form_binds_owner():
    owner, result = bind_owner_form(VALID_FORM)

    assert not result.has_errors
    assert owner.id is None
    assert owner.first_name == "Joe"
    assert owner.last_name == "Bloggs"
    assert owner.address == "123 Caramel Street"
    assert owner.city == "London"
    assert owner.telephone == "1316761638"


def test_submitted_id_is_ignored():
    owner, result = bind_owner_form({**VALID_FORM, "id": "7"})

    assert not result.has_errors
    assert owner.id is None


def test_values_are_trimmed():
    owner, result = bind_owner_form({**VALID_FORM, "firstName": "  Joe ", "telephone": " 1316761638 "})

    assert not result.has_errors
    assert owner.first_name == "Joe"
    assert owner.telephone == "1316761638"


def test_missing_fields_are_blank():
    owner, result = bind_owner_form({})

    assert {error.field for error in result.errors} == {"firstName", "lastName", "address", "city", "telephone"}
    assert result.errors_for("city") == ["must not be blank"]
    assert result.errors_for("telephone") == ["must not be blank"]
    assert owner.first_name == ""


def test_whitespace_only_is_blank():
    _, result = bind_owner_form({**VALID_FORM, "lastName": "   "})

    assert result.errors_for("lastName") == ["must not be blank"]
    assert len(result.errors) == 1


def test_telephone_must_have_ten_digits():
    for telephone in ["608555102", "60855510234", "608-555-10", "phone12345"]:
        owner, result = bind_owner_form({**VALID_FORM, "telephone": telephone})

        assert result.errors_for("telephone") == ["Telephone must be a 10-digit number"]
        assert owner.telephone == telephone


def test_invalid_form_keeps_submitted_values():
    owner, result = bind_owner_form({"firstName": "Joe", "lastName": "Bloggs", "telephone": "abc"})

    assert result.has_errors
    assert owner.first_name == "Joe"
    assert owner.last_name == "Bloggs"
    assert owner.telephone == "abc"
    assert owner.address == ""


def test_snake_case_names_are_accepted():
    owner, result = bind_owner_form({
        "first_name": "Joe",
        "last_name": "Bloggs",
        "address": "123 Caramel Street",
        "city": "London",
        "telephone": "1316761638",
    })

    assert not result.has_errors
    assert owner.last_name == "Bloggs"


def test_binding_result_reject_value():
    result = BindingResult()
    assert not result.has_errors

    result.reject_value("lastName", "notFound", "not found")

    assert result.has_errors
    assert result.has_field_errors("lastName")
    assert not result.has_field_errors("firstName")
    assert result.errors_for("lastName") == ["not found"]
    assert result.errors_for("firstName") == []


def test_missing_field_error_uses_form_name():
    form = {key: value for key, value in VALID_FORM.items() if key != "firstName"}

    _, result = bind_owner_form(form)

    assert [error.field for error in result.errors] == ["firstName"]
    assert result.errors_for("firstName") == ["must not be blank"]


def test_values_longer_than_their_column_are_rejected():
    owner, result = bind_owner_form({**VALID_FORM, "firstName": "x" * 31, "city": "c" * 81})

    assert result.errors_for("firstName") == ["size must be between 1 and 30"]
    assert result.errors_for("city") == ["size must be between 1 and 80"]
    assert owner.first_name == "x" * 31


def test_values_at_their_column_size_are_accepted():
    owner, result = bind_owner_form({**VALID_FORM, "lastName": "y" * 30, "address": "a" * 255})

    assert not result.has_errors
    assert owner.last_name == "y" * 30
