"""
Seed data generator.

Fills an empty store with synthetic users, one post each, using Faker.
Generation is best effort: a failed insert is logged and the batch moves on,
and the generator always returns once every insert has been attempted.
"""
# Standard library imports
import logging
from dataclasses import dataclass
from typing import Optional

# External package imports
from faker import Faker

# Local application imports
from ...core.security import hash_password
from ...domain.constants import PostFields, UserFields
from ...domain.models.user import User, Address, Geo, Company
from ...domain.models.post import Post
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.post_repository import PostRepository


logger = logging.getLogger(__name__)

SEED_PASSWORD = "password"
DEFAULT_SEED_USER_COUNT = 20


@dataclass
class SeedReport:
    """Outcome of one seeding run"""
    users_inserted: int = 0
    posts_inserted: int = 0
    failures: int = 0


class SeedGenerator:
    """Generates synthetic users and posts and writes them through the repositories"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        faker: Optional[Faker] = None,
        user_count: int = DEFAULT_SEED_USER_COUNT,
    ) -> None:
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.faker = faker if faker is not None else Faker()
        self.user_count = user_count
    
    def build_user(self, hashed_password: str) -> User:
        """Build one synthetic user with every text field cut to its column maximum"""
        fake = self.faker
        return User(
            id=None,
            name=fake.name()[:UserFields.NAME_MAX_LENGTH],
            username=fake.unique.user_name()[:UserFields.USERNAME_MAX_LENGTH],
            email=fake.unique.email()[:UserFields.EMAIL_MAX_LENGTH],
            hashed_password=hashed_password,
            address=Address(
                street=fake.street_name(),
                suite=fake.secondary_address(),
                city=fake.city(),
                zipcode=fake.zipcode(),
                geo=Geo(lat=str(fake.latitude()), lng=str(fake.longitude())),
            ),
            phone=fake.phone_number()[:UserFields.PHONE_MAX_LENGTH],
            website=fake.domain_name()[:UserFields.WEBSITE_MAX_LENGTH],
            company=Company(
                name=fake.company(),
                catch_phrase=fake.catch_phrase(),
                bs=fake.bs(),
            ),
        )
    
    def build_post(self, user_id: int) -> Post:
        """Build one synthetic post owned by `user_id`"""
        return Post(
            id=None,
            user_id=user_id,
            title=self.faker.sentence()[:PostFields.TITLE_MAX_LENGTH],
            body=self.faker.paragraph()[:PostFields.BODY_MAX_LENGTH],
        )
    
    async def generate(self) -> SeedReport:
        """
        Insert `user_count` users and one post per inserted user
        
        Returns:
            SeedReport with insert and failure counts
        """
        report = SeedReport()
        # Hashed once; every seed user shares the placeholder password
        hashed_password = hash_password(SEED_PASSWORD)
        
        for _ in range(self.user_count):
            try:
                user = await self.user_repository.create(self.build_user(hashed_password))
            except Exception as e:
                logger.error(f"Error inserting seed user: {e}")
                report.failures += 1
                continue
            report.users_inserted += 1
            
            try:
                await self.post_repository.create(self.build_post(user.id))
            except Exception as e:
                logger.error(f"Error inserting seed post for user {user.id}: {e}")
                report.failures += 1
                continue
            report.posts_inserted += 1
        
        return report
    
    async def seed_if_empty(self) -> Optional[SeedReport]:
        """
        Run the generator only when the store holds no users
        
        Returns:
            SeedReport if seeding ran, None if the store already had data
        """
        existing = await self.user_repository.count()
        if existing > 0:
            logger.info(f"Found {existing} existing users, skipping seed data")
            return None
        
        logger.info("No users found, generating initial data...")
        report = await self.generate()
        logger.info(
            f"Initial data generation completed: {report.users_inserted} users, "
            f"{report.posts_inserted} posts, {report.failures} failures"
        )
        return report
