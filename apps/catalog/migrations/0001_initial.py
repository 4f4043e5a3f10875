from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Category",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        help_text="Category name (e.g., Drinks, Burgers)", max_length=100
                    ),
                ),
                (
                    "store",
                    models.ForeignKey(
                        help_text="Store that owns this category",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="categories",
                        to="core.store",
                    ),
                ),
            ],
            options={
                "verbose_name": "Category",
                "verbose_name_plural": "Categories",
                "db_table": "catalog_categories",
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["store", "name"], name="cat_store_name_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="OptionGroup",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "name",
                    models.CharField(help_text="Option group name (e.g., Size)", max_length=100),
                ),
                (
                    "store",
                    models.ForeignKey(
                        help_text="Store that owns this option group",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="option_groups",
                        to="core.store",
                    ),
                ),
            ],
            options={
                "verbose_name": "Option Group",
                "verbose_name_plural": "Option Groups",
                "db_table": "catalog_option_groups",
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["store", "name"], name="optgroup_store_name_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Option",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("name", models.CharField(help_text="Option name (e.g., Large)", max_length=100)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="Amount added to the product price when selected",
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "option_group",
                    models.ForeignKey(
                        help_text="Option group this choice belongs to",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="options",
                        to="catalog.optiongroup",
                    ),
                ),
            ],
            options={
                "verbose_name": "Option",
                "verbose_name_plural": "Options",
                "db_table": "catalog_options",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("name", models.CharField(help_text="Product name", max_length=255)),
                (
                    "description",
                    models.TextField(blank=True, default="", help_text="Product description"),
                ),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Base unit price before options",
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "stock",
                    models.IntegerField(
                        default=0,
                        help_text="Units currently available",
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "image_url",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="URL of the product image (see the upload endpoint)",
                        max_length=500,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "category",
                    models.ForeignKey(
                        blank=True,
                        help_text="Optional product category",
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="products",
                        to="catalog.category",
                    ),
                ),
                (
                    "store",
                    models.ForeignKey(
                        help_text="Store that owns this product",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="products",
                        to="core.store",
                    ),
                ),
            ],
            options={
                "verbose_name": "Product",
                "verbose_name_plural": "Products",
                "db_table": "catalog_products",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(
                        fields=["store", "category"], name="product_store_category_idx"
                    ),
                    models.Index(fields=["store", "stock"], name="product_store_stock_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(stock__gte=0), name="product_stock_non_negative"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="ProductOptionGroup",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "option_group",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="product_option_groups",
                        to="catalog.optiongroup",
                    ),
                ),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="product_option_groups",
                        to="catalog.product",
                    ),
                ),
            ],
            options={
                "verbose_name": "Product Option Group",
                "verbose_name_plural": "Product Option Groups",
                "db_table": "catalog_product_option_groups",
                "unique_together": {("product", "option_group")},
            },
        ),
        migrations.AddField(
            model_name="product",
            name="option_groups",
            field=models.ManyToManyField(
                blank=True,
                help_text="Option groups offered with this product",
                related_name="products",
                through="catalog.ProductOptionGroup",
                to="catalog.optiongroup",
            ),
        ),
    ]
