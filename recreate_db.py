from campusnet.database import engine, SessionLocal
from campusnet.models import Base, RoleEnum
from campusnet.crud import user_crud
from campusnet.schemas.user_schema import UserCreate

DEMO_USERS = [
    UserCreate(email="director@college.edu", password="admin123", name="Dr. Smith",
               role=RoleEnum.OFFICIAL, position="Director"),
    UserCreate(email="prof.john@college.edu", password="teacher123", name="Prof. John",
               role=RoleEnum.TEACHER, branch="CSE"),
    UserCreate(email="prof.jane@college.edu", password="teacher123", name="Prof. Jane",
               role=RoleEnum.TEACHER, branch="IT"),
    UserCreate(email="student1@college.edu", password="student123", name="Alice Johnson",
               role=RoleEnum.STUDENT, branch="CSE"),
    UserCreate(email="student2@college.edu", password="student123", name="Bob Williams",
               role=RoleEnum.STUDENT, branch="CSE"),
    UserCreate(email="student3@college.edu", password="student123", name="Carol Davis",
               role=RoleEnum.STUDENT, branch="IT"),
]


def recreate_database(seed: bool = True):
    print("Dropping all tables...")
    Base.metadata.drop_all(bind=engine)

    print("Creating all tables...")
    Base.metadata.create_all(bind=engine)

    if seed:
        db = SessionLocal()
        try:
            for user_in in DEMO_USERS:
                user = user_crud.create_user(db, user_in)
                print(f"Created {user.role.value.lower()}: {user.email}")
        finally:
            db.close()

    print("Database recreated successfully!")

if __name__ == "__main__":
    recreate_database()
