from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.carts.models import Cart, CartItem
from apps.catalog.models import Category, Jewellery
from apps.favorites.models import Favorite
from apps.orders.models import Order, OrderItem
from apps.users.models import Address, User

CATEGORIES = [
    (
        "Rings",
        "Beautiful rings for every occasion - engagement, wedding, fashion, and more",
        "diamond-outline",
    ),
    (
        "Necklaces",
        "Elegant necklaces and pendants to complement any outfit",
        "ellipse-outline",
    ),
    (
        "Earrings",
        "Stunning earrings from subtle studs to statement pieces",
        "radio-outline",
    ),
    (
        "Bracelets",
        "Stylish bracelets and bangles for every wrist",
        "remove-outline",
    ),
]

JEWELLERY = [
    (
        "Diamond Solitaire Ring",
        "Beautiful diamond engagement ring with classic solitaire setting",
        "2500.00",
        "diamond-ring.jpg",
        "Rings",
    ),
    (
        "Vintage Engagement Ring",
        "Stunning vintage-style engagement ring with intricate details",
        "4500.00",
        "engagement-ring.jpg",
        "Rings",
    ),
    (
        "Rose Gold Wedding Band",
        "Elegant rose gold wedding band with subtle sparkle",
        "850.00",
        "rose-gold-ring.jpg",
        "Rings",
    ),
    (
        "Emerald Pendant Necklace",
        "Elegant emerald necklace with gold setting and delicate chain",
        "1850.00",
        "emerald-necklace.jpg",
        "Necklaces",
    ),
    (
        "Diamond Tennis Necklace",
        "Luxurious diamond tennis necklace perfect for special occasions",
        "3800.00",
        "diamond-necklace.jpg",
        "Necklaces",
    ),
    (
        "Pearl Strand Necklace",
        "Classic cultured pearl necklace with sterling silver clasp",
        "1200.00",
        "pearl-necklace.jpg",
        "Necklaces",
    ),
    (
        "Pearl Drop Earrings",
        "Classic white pearl drop earrings with gold accents",
        "680.00",
        "pearl-earrings.jpg",
        "Earrings",
    ),
    (
        "Diamond Stud Earrings",
        "Brilliant diamond stud earrings in platinum setting",
        "1500.00",
        "diamond-studs.jpg",
        "Earrings",
    ),
    (
        "Gold Hoop Earrings",
        "Elegant 14k gold hoop earrings with modern twist design",
        "950.00",
        "gold-earrings.jpg",
        "Earrings",
    ),
    (
        "Diamond Tennis Bracelet",
        "Classic diamond tennis bracelet with secure clasp",
        "3200.00",
        "diamond-tennis-bracelet.jpg",
        "Bracelets",
    ),
    (
        "Rose Gold Charm Bracelet",
        "Elegant rose gold bracelet with customizable charm options",
        "1200.00",
        "rose-gold-bangle.jpg",
        "Bracelets",
    ),
    (
        "Ruby Tennis Bracelet",
        "Exquisite ruby and diamond bracelet in white gold setting",
        "2800.00",
        "ruby-bracelet.jpg",
        "Bracelets",
    ),
    (
        "Silver Chain Bracelet",
        "Delicate sterling silver chain bracelet with adjustable length",
        "320.00",
        "silver-bracelet.jpg",
        "Bracelets",
    ),
]

USERS = [
    {
        "username": "testuser",
        "email": "test@example.com",
        "password": "123456",
        "first_name": "test",
        "last_name": "user",
    },
    {
        "username": "staff",
        "email": "staff@glowy.com",
        "password": "StaffPass123!",
        "first_name": "staff",
        "last_name": "user",
        "is_staff": True,
    },
]

DEMO_ADDRESS = {
    "street": "12 Jewel Lane",
    "city": "London",
    "state": "Greater London",
    "postal_code": "EC1A 1BB",
    "country": "United Kingdom",
}


class Command(BaseCommand):
    help = "Seed the Glowy catalog and demo accounts."

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush", action="store_true", help="Delete existing data before seeding"
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["flush"]:
            self.stdout.write("Flushing existing data...")
            # Orders protect jewellery and addresses, so they go first
            OrderItem.objects.all().delete()
            Order.objects.all().delete()
            Favorite.objects.all().delete()
            CartItem.objects.all().delete()
            Cart.objects.all().delete()
            Address.objects.all().delete()
            User.objects.all().delete()
            Jewellery.objects.all().delete()
            Category.objects.all().delete()

        self.stdout.write("Seeding categories...")
        by_name = {}
        for name, description, icon in CATEGORIES:
            category, _ = Category.objects.get_or_create(
                name=name,
                defaults={"description": description, "icon_name": icon, "is_active": True},
            )
            by_name[name] = category

        self.stdout.write("Seeding jewellery...")
        created_count = 0
        for name, description, price, image, category_name in JEWELLERY:
            _, created = Jewellery.objects.get_or_create(
                name=name,
                defaults={
                    "description": description,
                    "price": Decimal(price),
                    "image_url": image,
                    "category": by_name[category_name],
                },
            )
            created_count += int(created)
        self.stdout.write(f"  {created_count} new of {len(JEWELLERY)} pieces")

        self.stdout.write("Seeding users...")
        for payload in USERS:
            attrs = dict(payload)
            raw_password = attrs.pop("password")
            defaults = {
                "username": attrs["username"],
                "first_name": attrs["first_name"],
                "last_name": attrs["last_name"],
                "is_staff": attrs.get("is_staff", False),
            }
            user, created = User.objects.get_or_create(email=attrs["email"], defaults=defaults)
            if not created:
                for field, value in defaults.items():
                    setattr(user, field, value)
            user.set_password(raw_password)
            user.save()
            Cart.objects.get_or_create(user=user)

        customer = User.objects.get(email=USERS[0]["email"])
        if not customer.addresses.exists():
            self.stdout.write("Seeding demo address...")
            Address.objects.create(user=customer, is_default=True, **DEMO_ADDRESS)

        self.stdout.write(self.style.SUCCESS("Glowy seed completed."))
