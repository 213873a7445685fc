import django.db.models.functions.text
from django.db import migrations, models


def lowercase_emails(apps, schema_editor):
    User = apps.get_model('core', 'User')
    for user in User.objects.all().only('id', 'email'):
        lowered = user.email.lower()
        if lowered != user.email:
            User.objects.filter(pk=user.pk).update(email=lowered)


class Migration(migrations.Migration):

    dependencies = [
        ('core', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(lowercase_emails, migrations.RunPython.noop),
        migrations.AddConstraint(
            model_name='user',
            constraint=models.UniqueConstraint(django.db.models.functions.text.Lower('email'), name='core_user_email_ci_unique'),
        ),
    ]
