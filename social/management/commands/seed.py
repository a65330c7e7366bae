"""Management command to seed the database with sample users, posts, and related data."""

from random import choice, randint, sample

from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand
from django.db import transaction
from faker import Faker

from social.models import Comment, Post, Reply, User
from social.services.relationships import FOLLOW, LIKE, SAVE, RelationshipService


class Command(BaseCommand):
    """Seed users, follows, posts, likes, saves, comments and replies."""
    USER_COUNT = 30
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Number of users to create.")
        parser.add_argument("--admin-email", default="admin@example.org", help="Email of the ADMIN account.")

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')
        self.relationships = RelationshipService()

    @transaction.atomic
    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        users = self.create_users(options["users"], options["admin_email"])
        self.seed_follows(users, per_user=5)
        posts = self.seed_posts(users, per_user=2)
        self.seed_likes_and_saves(users, posts)
        self.seed_comments(users, posts, max_per_post=3)
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, count, admin_email):
        password = make_password(self.DEFAULT_PASSWORD)
        users = []
        if not User.objects.filter(email=admin_email).exists():
            users.append(User.objects.create(
                fullname="Site Admin", username="admin", email=admin_email,
                password=password, role=User.ROLE_ADMIN,
            ))
        while len(users) < count:
            username = self.faker.unique.user_name()
            users.append(User.objects.create(
                fullname=self.faker.name(),
                username=username,
                email=f"{username}@{self.faker.free_email_domain()}",
                password=password,
                link=self.faker.url(),
            ))
        self.stdout.write(f"Created {len(users)} users")
        return users

    def seed_follows(self, users, per_user):
        for user in users:
            others = [u for u in users if u.pk != user.pk]
            for target in sample(others, min(per_user, len(others))):
                self.relationships.toggle(FOLLOW, user.pk, target.pk)

    def seed_posts(self, users, per_user):
        posts = []
        for user in users:
            for _ in range(randint(1, per_user)):
                posts.append(Post.objects.create(user=user, content=self.faker.paragraph(nb_sentences=3)))
        self.stdout.write(f"Created {len(posts)} posts")
        return posts

    def seed_likes_and_saves(self, users, posts):
        for user in users:
            for post in sample(posts, min(randint(0, 6), len(posts))):
                self.relationships.toggle(LIKE, user.pk, post.pk)
            for post in sample(posts, min(randint(0, 2), len(posts))):
                self.relationships.toggle(SAVE, user.pk, post.pk)

    def seed_comments(self, users, posts, max_per_post):
        for post in posts:
            for _ in range(randint(0, max_per_post)):
                comment = Comment.objects.create(post=post, user=choice(users), content=self.faker.sentence())
                if randint(0, 1):
                    Reply.objects.create(post=post, comment=comment, user=choice(users), content=self.faker.sentence())
