from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import ReadOnlyPasswordHashField
from django import forms

from students.models import Student

User = get_user_model()


# ==================================================
# CUSTOM USER FORMS WITH PASSWORD HASHING
# ==================================================

class UserCreationForm(forms.ModelForm):
	"""
	A form for creating new users with password hashing.
	Includes all the required fields, plus a repeated password.
	"""
	password1 = forms.CharField(label='Password', widget=forms.PasswordInput)
	password2 = forms.CharField(label='Password confirmation', widget=forms.PasswordInput)

	class Meta:
		model = User
		fields = ('email', 'name')

	def clean_password2(self):
		password1 = self.cleaned_data.get("password1")
		password2 = self.cleaned_data.get("password2")
		if password1 and password2 and password1 != password2:
			raise forms.ValidationError("Passwords don't match")
		return password2

	def save(self, commit=True):
		user = super().save(commit=False)
		user.set_password(self.cleaned_data["password1"])
		if commit:
			user.save()
		return user


class UserChangeForm(forms.ModelForm):
	"""
	A form for updating users. Shows the stored hash read-only;
	passwords are changed through the admin password form.
	"""
	password = ReadOnlyPasswordHashField(
		label="Password",
		help_text=(
			"Raw passwords are not stored, so there is no way to see this "
			"user's password, but you can change the password using "
			"<a href=\"../password/\">this form</a>."
		),
	)

	class Meta:
		model = User
		fields = ('email', 'name', 'password', 'is_active', 'is_staff', 'is_superuser')

	def clean_password(self):
		return self.initial.get("password")


class StudentInline(admin.TabularInline):
	model = Student
	extra = 0
	fields = ("name", "created_at")
	readonly_fields = ("created_at",)


@admin.register(User)
class CustomUserAdmin(BaseUserAdmin):
	form = UserChangeForm
	add_form = UserCreationForm

	list_display = ("email", "name", "is_active", "is_staff", "date_joined")
	search_fields = ("email", "name")
	list_filter = ("is_active", "is_staff", "is_superuser")
	readonly_fields = ("date_joined", "last_login")
	inlines = [StudentInline]

	fieldsets = (
		(None, {"fields": ("email", "password")}),
		("Personal Info", {"fields": ("name",)}),
		("Permissions", {
			"fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions")
		}),
		("Important dates", {"fields": ("date_joined", "last_login")}),
	)

	add_fieldsets = (
		(None, {
			"classes": ("wide",),
			"fields": ("email", "name", "password1", "password2", "is_active", "is_staff"),
		}),
	)

	ordering = ("-date_joined",)
	filter_horizontal = ("groups", "user_permissions")
