import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="GitHubProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("github_id", models.PositiveBigIntegerField(unique=True)),
                ("login", models.CharField(max_length=255)),
                ("name", models.CharField(blank=True, max_length=255)),
                ("avatar_url", models.URLField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="github_profile", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["login"],
            },
        ),
        migrations.CreateModel(
            name="GoogleClassroomCredential",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("token", models.TextField()),
                ("refresh_token", models.TextField(blank=True)),
                ("token_uri", models.URLField(default="https://oauth2.googleapis.com/token")),
                ("scopes", models.TextField(blank=True, help_text="Space separated")),
                ("expiry", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="google_classroom_credential", to=settings.AUTH_USER_MODEL)),
            ],
        ),
    ]
