import pytest
from apps.accounts.models import User


@pytest.mark.django_db
class TestUserManager:

    def test_create_user(self):
        user = User.objects.create_user(email='Someone@EXAMPLE.com', password='TestPass123!')

        assert user.email == 'Someone@example.com'
        assert user.check_password('TestPass123!')
        assert user.is_active is True
        assert user.is_staff is False

    def test_create_user_requires_email(self):
        with pytest.raises(ValueError):
            User.objects.create_user(email='', password='TestPass123!')

    def test_create_superuser(self):
        admin = User.objects.create_superuser(email='admin@example.com', password='TestPass123!')
        assert admin.is_staff is True
        assert admin.is_superuser is True

    def test_display_name_falls_back_to_email(self):
        user = User(email='maria.lopez@example.com')
        assert user.get_display_name() == 'maria.lopez'

