# clinic/management/commands/ensure_callers.py
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from rest_framework.authtoken.models import Token

User = get_user_model()

DEFAULT_CALLERS = ["doctor1", "doctor2", "patient1", "patient2"]


class Command(BaseCommand):
    help = "Ensure caller accounts exist and print their API tokens (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument("usernames", nargs="*", help="caller usernames (default: demo set)")

    def handle(self, *args, **opts):
        for username in opts["usernames"] or DEFAULT_CALLERS:
            user, created = User.objects.get_or_create(username=username, defaults={"is_active": True})
            if created:
                # 仅通过 token 调用 API，不允许密码登录
                user.set_unusable_password()
                user.save(update_fields=["password"])
            token, _ = Token.objects.get_or_create(user=user)
            state = "created" if created else "exists"
            self.stdout.write(self.style.SUCCESS(f"{username} ({state}): Token {token.key}"))
        self.stdout.write(self.style.SUCCESS("All callers ensured."))
