"""Seed Data — the records every fresh store starts with."""

SEED_RECORDS: tuple[dict, ...] = (
    {
        "id": 101, "indexNumber": "UG1001", "name": "Alice Smith",
        "major": "Computer Science", "age": 20, "gpa": 3.8,
        "email": "alice@example.com", "enrollmentDate": "2023-09-01",
    },
    {
        "id": 102, "indexNumber": "UG1002", "name": "Bob Johnson",
        "major": "Mechanical Engineering", "age": 21, "gpa": 3.2,
        "email": "bob@example.com", "enrollmentDate": "2022-09-01",
    },
    {
        "id": 103, "indexNumber": "UG1003", "name": "Charlie Brown",
        "major": "History", "age": 19, "gpa": 2.9,
        "email": "charlie@example.com", "enrollmentDate": "2023-01-15",
    },
    {
        "id": 104, "indexNumber": "UG1004", "name": "Dana Scully",
        "major": "Biology", "age": 22, "gpa": 3.95,
        "email": "dana@example.com", "enrollmentDate": "2021-09-01",
    },
    {
        "id": 105, "indexNumber": "UG1005", "name": "Evan Peters",
        "major": "Fine Arts", "age": 20, "gpa": 3.5,
        "email": "evan@example.com", "enrollmentDate": "2023-09-01",
    },
)

SEED_NEXT_ID = 106
