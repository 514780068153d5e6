from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from ra_server.db.session import SessionLocal
from ra_server.models.post import Post
from ra_server.models.user import User

_LOG = logging.getLogger("ra_server.seed")

USERS = [
    {"name": "Alice Johnson", "email": "alice.johnson@example.com", "role": "author"},
    {"name": "Bob Smith", "email": "bob.smith@example.com", "role": "author"},
    {"name": "Charlie Brown", "email": "charlie.brown@example.com", "role": "author"},
]

# author email -> (title, content, status)
POSTS = {
    "alice.johnson@example.com": [
        ("Introduction to Java", "Java is a programming language...", "published"),
        ("Advanced Java Techniques", "In this post, we explore advanced topics...", "published"),
        ("Java Best Practices", "Following best practices keeps code maintainable...", "draft"),
        ("Spring Boot Basics", "Spring Boot makes it easy to create applications...", "published"),
        ("Microservices Architecture", "Microservices split a system into services...", "draft"),
    ],
    "bob.smith@example.com": [
        ("Python for Beginners", "Python is a versatile language...", "published"),
        ("Data Science with Python", "Data analysis with pandas and numpy...", "published"),
    ],
}


def seed_demo_data(db: Session) -> bool:
    """Insert demo users and posts into an empty database. Returns False when data already exists."""
    if db.query(User.id).first() is not None:
        return False
    users = {row["email"]: User(**row) for row in USERS}
    db.add_all(users.values())
    db.flush()
    for email, posts in POSTS.items():
        author = users[email]
        for title, content, status in posts:
            db.add(Post(title=title, content=content, user_id=author.id, status=status))
    db.commit()
    _LOG.info("seeded %d users and %d posts", len(users), sum(len(p) for p in POSTS.values()))
    return True


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    with SessionLocal() as db:
        if not seed_demo_data(db):
            _LOG.info("database already has users, nothing seeded")


if __name__ == "__main__":
    main()
