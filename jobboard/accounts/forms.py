from django import forms
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password

User = get_user_model()

SELF_SERVICE_ROLES = [
    (User.Role.JOBSEEKER.value, User.Role.JOBSEEKER.label),
    (User.Role.RECRUITER.value, User.Role.RECRUITER.label),
]


class RegistrationForm(forms.ModelForm):
    password = forms.CharField(error_messages={"required": "Please provide a password"})
    role = forms.ChoiceField(choices=SELF_SERVICE_ROLES, required=False)

    class Meta:
        model = User
        fields = ["name", "email", "role", "location", "bio", "company", "position"]
        error_messages = {
            "name": {"required": "Please provide a name"},
            "email": {"required": "Please provide an email", "invalid": "Please provide a valid email"},
        }

    def clean_role(self):
        return self.cleaned_data.get("role") or User.Role.JOBSEEKER

    def clean_location(self):
        return self.cleaned_data.get("location") or "my city"

    def clean(self):
        cleaned = super().clean()
        password = cleaned.get("password")
        if password:
            candidate = User(name=cleaned.get("name") or "", email=cleaned.get("email") or "")
            try:
                validate_password(password, user=candidate)
            except forms.ValidationError as exc:
                self.add_error("password", exc)
        return cleaned

    def save(self, commit=True):
        user = super().save(commit=False)
        user.set_password(self.cleaned_data["password"])
        if commit:
            user.save()
        return user


class ProfileForm(forms.ModelForm):
    class Meta:
        model = User
        fields = ["name", "email", "location", "bio", "company", "position"]
        error_messages = {
            "name": {"required": "Please provide all required values"},
            "email": {"required": "Please provide all required values", "invalid": "Please provide a valid email"},
        }


class LoginForm(forms.Form):
    email = forms.CharField(error_messages={"required": "Please provide email and password"})
    password = forms.CharField(strip=False, error_messages={"required": "Please provide email and password"})
