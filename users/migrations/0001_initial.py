from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("password", models.CharField(max_length=128)),
                ("name", models.CharField(max_length=100)),
                ("bio", models.TextField(blank=True, null=True)),
                ("phone_number", models.CharField(blank=True, max_length=30, null=True)),
                ("image_url", models.URLField(blank=True, max_length=500, null=True)),
                ("is_helper", models.BooleanField(default=False)),
                ("roles", models.JSONField(default=list)),
                (
                    "provider",
                    models.CharField(
                        choices=[
                            ("local", "Local"),
                            ("google", "Google"),
                            ("facebook", "Facebook"),
                            ("github", "GitHub"),
                        ],
                        default="local",
                        max_length=20,
                    ),
                ),
                ("reset_password_token", models.CharField(blank=True, max_length=64, null=True, unique=True)),
                ("version", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
        ),
    ]
