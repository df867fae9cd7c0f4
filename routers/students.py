# routers/students.py
"""
Student API routes.

Creating, moving and deleting students updates the occupancy of the rooms
involved in the same transaction. ADMIN and STAFF can write.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_user, require
from models import Student
from schemas.student import StudentCreate, StudentUpdate, StudentResponse
from services import resident_service
from services.access_policy import Permission
from services.repository import EntityStore

router = APIRouter(prefix="/api/students", tags=["students"])


@router.get("", response_model=List[StudentResponse], summary="List students")
def list_students(db: Session = Depends(get_session), user=Depends(get_current_user)):
     return EntityStore(db).students.list(order_by=Student.name)


@router.get("/{student_id}", response_model=StudentResponse, summary="Get student by ID")
def get_student(student_id: str, db: Session = Depends(get_session), user=Depends(get_current_user)):
     return EntityStore(db).students.get(student_id)


@router.post(
     "",
     response_model=StudentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Register a student in a room"
)
def create_student(
     body: StudentCreate,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.STUDENT_WRITE))
):
     """
     Register a student and take one place in their room.

     - **studentCode**: unique code, 409 when taken
     - **roomId**: target room; 409 when it is full or under maintenance
     """
     return resident_service.create_student(db, body)


@router.put("/{student_id}", response_model=StudentResponse, summary="Update or move a student")
def update_student(
     student_id: str,
     body: StudentUpdate,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.STUDENT_WRITE))
):
     """
     Update an existing student. A different **roomId** moves the student:
     the old room gets a place back and the new one loses one.
     """
     return resident_service.update_student(db, student_id, body.changes())


@router.delete(
     "/{student_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Remove a student"
)
def delete_student(
     student_id: str,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.STUDENT_WRITE))
):
     resident_service.delete_student(db, student_id)
     return None
