from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='TrilhaAuditoria',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('usuario', models.CharField(help_text='User who performed the action', max_length=150)),
                ('acao', models.CharField(help_text="Type of action performed, e.g. 'CRIACAO', 'EXCLUSAO'", max_length=100)),
                ('entidade', models.CharField(db_index=True, help_text='Type of entity affected', max_length=100)),
                ('registro_id', models.IntegerField(blank=True, help_text='ID of the entity affected', null=True)),
                ('detalhes', models.TextField(blank=True, help_text='Human-readable description of the action')),
                ('data_hora', models.DateTimeField(db_index=True, help_text='When the action occurred')),
            ],
            options={
                'verbose_name': 'Trilha de Auditoria',
                'verbose_name_plural': 'Trilhas de Auditoria',
                'ordering': ['-data_hora', '-id'],
                'indexes': [models.Index(fields=['entidade', 'registro_id'], name='trilha_entidade_registro_idx')],
            },
        ),
    ]
