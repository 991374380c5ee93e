from django import forms
from django.contrib.auth.forms import AuthenticationForm
from django.contrib.auth.password_validation import validate_password
from .models import CustomUser, Faculty, Profile

class SignInForm(AuthenticationForm):
    """Sign-in form that normalizes email to lowercase"""
    username = forms.EmailField(
        label="Email",
        widget=forms.EmailInput(attrs={'autofocus': True, 'placeholder': 'john@ucu.ac.ug'}),
    )
    password = forms.CharField(
        label="Password",
        strip=False,
        widget=forms.PasswordInput(attrs={'placeholder': '••••••••', 'minlength': 6}),
    )

    def clean_username(self):
        username = self.cleaned_data.get('username')
        if username:
            return username.lower().strip()
        return username


class SignUpForm(forms.Form):
    full_name = forms.CharField(max_length=200, required=True, widget=forms.TextInput(attrs={'placeholder': 'John Doe'}))
    role = forms.ChoiceField(choices=Profile.Role.choices, initial=Profile.Role.STUDENT, required=True)
    faculty = forms.ModelChoiceField(
        queryset=Faculty.objects.order_by('name'),
        required=False,
        empty_label="Select faculty",
    )
    student_id = forms.CharField(
        max_length=50,
        required=False,
        label="Student ID",
        widget=forms.TextInput(attrs={'placeholder': '2024/ABC/001'}),
    )
    email = forms.EmailField(required=True, widget=forms.EmailInput(attrs={'placeholder': 'john@ucu.ac.ug'}))
    password = forms.CharField(
        required=True,
        strip=False,
        widget=forms.PasswordInput(attrs={'placeholder': '••••••••', 'minlength': 6}),
    )

    def clean_email(self):
        email = self.cleaned_data.get("email")
        if email:
            email = email.lower().strip()
            if CustomUser.objects.filter(email=email).exists():
                raise forms.ValidationError("A user with this email already exists.")
        return email

    def clean_password(self):
        password = self.cleaned_data.get("password")
        if password:
            validate_password(password)
        return password

    def clean(self):
        cleaned = super().clean()
        # Student ID only applies to students
        if cleaned.get("role") != Profile.Role.STUDENT:
            cleaned["student_id"] = ""
        return cleaned
