import django.core.validators
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
            name="Form",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                ("status", models.CharField(choices=[("draft", "Draft"), ("public", "Public"), ("private", "Private"), ("disabled", "Disabled"), ("deleted", "Deleted")], db_index=True, default="draft", max_length=20)),
                ("type", models.CharField(choices=[("quiz", "Quiz"), ("survey", "Survey")], db_index=True, max_length=10)),
                ("code", models.CharField(max_length=16, unique=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="forms", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="Question",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("position", models.PositiveIntegerField(default=0)),
                ("type", models.CharField(choices=[("text-input", "Text input"), ("date", "Date"), ("multiple-choice", "Multiple choice"), ("checkbox", "Checkbox"), ("radio-button", "Radio button"), ("dropdown", "Dropdown"), ("scale", "Scale"), ("file", "File upload")], max_length=20)),
                ("text", models.TextField()),
                ("required", models.BooleanField(default=True)),
                ("total_score", models.FloatField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(0)])),
                ("answer", models.TextField(blank=True, null=True)),
                ("placeholder", models.CharField(blank=True, max_length=255, null=True)),
                ("min_length", models.PositiveIntegerField(blank=True, null=True)),
                ("max_length", models.PositiveIntegerField(blank=True, null=True)),
                ("min_selection", models.PositiveIntegerField(blank=True, null=True)),
                ("max_selection", models.PositiveIntegerField(blank=True, null=True)),
                ("allowed_file_types", models.CharField(blank=True, max_length=255, null=True)),
                ("scale_min", models.IntegerField(blank=True, null=True)),
                ("scale_max", models.IntegerField(blank=True, null=True)),
                ("scale_label_min", models.CharField(blank=True, max_length=255, null=True)),
                ("scale_label_max", models.CharField(blank=True, max_length=255, null=True)),
                ("form", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="questions", to="forms.form")),
            ],
            options={
                "ordering": ["position", "id"],
            },
        ),
        migrations.CreateModel(
            name="Option",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("position", models.PositiveIntegerField(default=0)),
                ("text", models.CharField(max_length=500)),
                ("is_correct", models.BooleanField(default=False)),
                ("score", models.FloatField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(0)])),
                ("question", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="options", to="forms.question")),
            ],
            options={
                "ordering": ["position", "id"],
            },
        ),
        migrations.CreateModel(
            name="Attachment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("position", models.PositiveIntegerField(default=0)),
                ("file_path", models.URLField(max_length=1000)),
                ("file_type", models.CharField(blank=True, default="", max_length=100)),
                ("question", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="attachments", to="forms.question")),
            ],
            options={
                "ordering": ["position", "id"],
            },
        ),
    ]
