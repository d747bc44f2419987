from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="StateRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("collection_id", models.CharField(max_length=255)),
                ("identifier", models.CharField(max_length=255)),
                ("document", models.JSONField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "composer_world_state",
                "ordering": ["collection_id", "id"],
                "indexes": [
                    models.Index(fields=["collection_id"], name="idx_world_state_collection"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("collection_id", "identifier"),
                        name="uniq_world_state_collection_identifier",
                    ),
                ],
            },
        ),
    ]
