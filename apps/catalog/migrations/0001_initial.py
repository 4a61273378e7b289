from django.conf import settings
from django.db import migrations, models
import django.core.validators
import django.db.models.deletion
import simple_history.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ParentProduct',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Nombre')),
                ('description', models.TextField(blank=True, verbose_name='Descripción')),
                ('category', models.CharField(blank=True, db_index=True, help_text='Clave de categoría (ej: "on-the-move")', max_length=100, verbose_name='Categoría')),
                ('highlighted', models.BooleanField(default=False, verbose_name='Destacado')),
                ('age_recommendation', models.CharField(blank=True, max_length=100, verbose_name='Edad recomendada')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Creado el')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Actualizado el')),
            ],
            options={
                'verbose_name': 'Producto',
                'verbose_name_plural': 'Productos',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='ProductVariant',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('variant_name', models.CharField(max_length=255, verbose_name='Nombre de la variante')),
                ('price', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(0)], verbose_name='Precio (CLP)')),
                ('images', models.JSONField(blank=True, default=list, help_text='Lista ordenada de URLs de imágenes', verbose_name='Imágenes')),
                ('description', models.TextField(blank=True, help_text='Reemplaza la descripción del producto (opcional)', verbose_name='Descripción')),
                ('dimensions', models.CharField(blank=True, max_length=255, verbose_name='Dimensiones')),
                ('stock', models.IntegerField(default=0, verbose_name='Stock')),
                ('attributes', models.JSONField(blank=True, default=dict, help_text='Atributos libres, ej: {"color": "Rojo", "size": "M"}', verbose_name='Atributos')),
                ('is_default', models.BooleanField(default=False, verbose_name='Variante por defecto')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Creado el')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Actualizado el')),
                ('parent', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='variants', to='catalog.parentproduct', verbose_name='Producto')),
            ],
            options={
                'verbose_name': 'Variante',
                'verbose_name_plural': 'Variantes',
                'ordering': ['variant_name'],
            },
        ),
        migrations.CreateModel(
            name='HistoricalParentProduct',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Nombre')),
                ('description', models.TextField(blank=True, verbose_name='Descripción')),
                ('category', models.CharField(blank=True, db_index=True, help_text='Clave de categoría (ej: "on-the-move")', max_length=100, verbose_name='Categoría')),
                ('highlighted', models.BooleanField(default=False, verbose_name='Destacado')),
                ('age_recommendation', models.CharField(blank=True, max_length=100, verbose_name='Edad recomendada')),
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Creado el')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Actualizado el')),
                ('history_id', models.AutoField(primary_key=True, serialize=False)),
                ('history_date', models.DateTimeField(db_index=True)),
                ('history_change_reason', models.CharField(max_length=100, null=True)),
                ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
                ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'historical Producto',
                'verbose_name_plural': 'historical Productos',
                'ordering': ('-history_date', '-history_id'),
                'get_latest_by': ('history_date', 'history_id'),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='HistoricalProductVariant',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                ('variant_name', models.CharField(max_length=255, verbose_name='Nombre de la variante')),
                ('price', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(0)], verbose_name='Precio (CLP)')),
                ('images', models.JSONField(blank=True, default=list, help_text='Lista ordenada de URLs de imágenes', verbose_name='Imágenes')),
                ('description', models.TextField(blank=True, help_text='Reemplaza la descripción del producto (opcional)', verbose_name='Descripción')),
                ('dimensions', models.CharField(blank=True, max_length=255, verbose_name='Dimensiones')),
                ('stock', models.IntegerField(default=0, verbose_name='Stock')),
                ('attributes', models.JSONField(blank=True, default=dict, help_text='Atributos libres, ej: {"color": "Rojo", "size": "M"}', verbose_name='Atributos')),
                ('is_default', models.BooleanField(default=False, verbose_name='Variante por defecto')),
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Creado el')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Actualizado el')),
                ('history_id', models.AutoField(primary_key=True, serialize=False)),
                ('history_date', models.DateTimeField(db_index=True)),
                ('history_change_reason', models.CharField(max_length=100, null=True)),
                ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
                ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('parent', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='catalog.parentproduct', verbose_name='Producto')),
            ],
            options={
                'verbose_name': 'historical Variante',
                'verbose_name_plural': 'historical Variantes',
                'ordering': ('-history_date', '-history_id'),
                'get_latest_by': ('history_date', 'history_id'),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
