from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("rosters", "0001_initial"),
    ]

    operations = [
        migrations.AddConstraint(
            model_name="rosterentry",
            constraint=models.UniqueConstraint(
                condition=models.Q(("user__isnull", False)),
                fields=("roster", "user"),
                name="unique_roster_user",
            ),
        ),
    ]
