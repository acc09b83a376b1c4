from django import forms


class SignupForm(forms.Form):
    """Registration data; hashing happens in ``AccountService.register``."""

    email = forms.EmailField()
    name = forms.CharField(max_length=100)
    password = forms.CharField(widget=forms.PasswordInput, min_length=6)
    is_helper = forms.BooleanField(required=False)


class LoginForm(forms.Form):
    """Simple login form capturing email and password."""

    email = forms.EmailField()
    password = forms.CharField(widget=forms.PasswordInput)


class UpdateProfileForm(forms.Form):
    """Full profile replacement; blank optional fields clear the value."""

    name = forms.CharField(max_length=100)
    image_url = forms.URLField(max_length=500, required=False, assume_scheme="https")
    bio = forms.CharField(widget=forms.Textarea, required=False)
    phone_number = forms.CharField(max_length=30, required=False)

    def clean(self):
        cleaned = super().clean()
        for field in ("image_url", "bio", "phone_number"):
            if field in cleaned and not cleaned[field]:
                cleaned[field] = None
        return cleaned


class UpdateEmailForm(forms.Form):
    email = forms.EmailField()


class UpdatePasswordForm(forms.Form):
    old_password = forms.CharField(widget=forms.PasswordInput)
    new_password = forms.CharField(widget=forms.PasswordInput, min_length=6)


class ForgotPasswordForm(forms.Form):
    email = forms.EmailField()


class ResetPasswordForm(forms.Form):
    token = forms.CharField(max_length=64)
    password = forms.CharField(widget=forms.PasswordInput, min_length=6)
