from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Department',
            fields=[
                ('id', models.CharField(max_length=64, primary_key=True, serialize=False)),
                ('seq', models.PositiveBigIntegerField(db_index=True, default=0, editable=False)),
                ('name', models.CharField(max_length=255)),
            ],
            options={
                'db_table': 'clinic_departments',
                'ordering': ['seq'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Doctor',
            fields=[
                ('id', models.CharField(max_length=64, primary_key=True, serialize=False)),
                ('seq', models.PositiveBigIntegerField(db_index=True, default=0, editable=False)),
                ('owner', models.CharField(db_index=True, max_length=255)),
                ('name', models.CharField(max_length=255)),
                ('department_id', models.CharField(max_length=64)),
                ('image', models.TextField()),
                ('available', models.BooleanField(blank=True, default=None, null=True)),
            ],
            options={
                'db_table': 'clinic_doctors',
                'ordering': ['seq'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Patient',
            fields=[
                ('id', models.CharField(max_length=64, primary_key=True, serialize=False)),
                ('seq', models.PositiveBigIntegerField(db_index=True, default=0, editable=False)),
                ('owner', models.CharField(db_index=True, max_length=255)),
                ('name', models.CharField(max_length=255)),
                ('age', models.PositiveIntegerField()),
            ],
            options={
                'db_table': 'clinic_patients',
                'ordering': ['seq'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Consultation',
            fields=[
                ('id', models.CharField(max_length=64, primary_key=True, serialize=False)),
                ('seq', models.PositiveBigIntegerField(db_index=True, default=0, editable=False)),
                ('patient_id', models.CharField(db_index=True, max_length=64)),
                ('problem', models.TextField()),
                ('department_id', models.CharField(max_length=64)),
            ],
            options={
                'db_table': 'clinic_consultations',
                'ordering': ['seq'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Chat',
            fields=[
                ('id', models.CharField(max_length=64, primary_key=True, serialize=False)),
                ('seq', models.PositiveBigIntegerField(db_index=True, default=0, editable=False)),
                ('patient_id', models.CharField(max_length=64)),
                ('doctor_id', models.CharField(max_length=64)),
                ('message', models.TextField()),
                ('timestamp', models.CharField(max_length=64)),
            ],
            options={
                'db_table': 'clinic_chats',
                'ordering': ['seq'],
                'abstract': False,
            },
        ),
    ]
