from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Politica',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nome', models.CharField(max_length=200)),
                ('descricao', models.TextField(blank=True)),
                ('categoria', models.CharField(blank=True, help_text="e.g. 'Segurança da Informação', 'Financeiro'", max_length=100)),
                ('ativa', models.BooleanField(default=True)),
                ('data_criacao', models.DateTimeField(db_index=True, help_text='When the policy was created')),
            ],
            options={
                'verbose_name': 'Política',
                'verbose_name_plural': 'Políticas',
                'ordering': ['id'],
            },
        ),
    ]
