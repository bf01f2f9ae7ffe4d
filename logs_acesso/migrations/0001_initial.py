from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='LogAcesso',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('usuario', models.CharField(help_text='User who accessed the system', max_length=150)),
                ('acao', models.CharField(help_text="Action performed, e.g. 'LOGIN', 'CONSULTA'", max_length=100)),
                ('recurso', models.CharField(blank=True, help_text='Resource that was accessed', max_length=255)),
                ('endereco_ip', models.GenericIPAddressField(blank=True, help_text='IP address of the client', null=True)),
                ('sucesso', models.BooleanField(default=True, help_text='Whether the access succeeded')),
                ('data_hora', models.DateTimeField(db_index=True, help_text='When the access happened')),
            ],
            options={
                'verbose_name': 'Log de Acesso',
                'verbose_name_plural': 'Logs de Acesso',
                'ordering': ['-data_hora', '-id'],
            },
        ),
    ]
