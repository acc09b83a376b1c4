"""Unit tests for the users request forms."""

from users.forms import UpdateProfileForm


class TestUpdateProfileForm:
    def test_image_url_without_scheme_gets_https(self) -> None:
        assert UpdateProfileForm.base_fields["image_url"].assume_scheme == "https"

        form = UpdateProfileForm({"name": "Erin", "image_url": "example.com/me.png"})

        assert form.is_valid(), form.errors
        assert form.cleaned_data["image_url"] == "https://example.com/me.png"

    def test_blank_optional_fields_become_none(self) -> None:
        form = UpdateProfileForm({"name": "Erin", "image_url": "", "bio": "", "phone_number": ""})

        assert form.is_valid()
        assert form.cleaned_data["image_url"] is None
        assert form.cleaned_data["bio"] is None
        assert form.cleaned_data["phone_number"] is None
