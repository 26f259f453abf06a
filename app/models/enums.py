# app/models/enums.py
import enum


class Gender(enum.Enum):
    male = "Male"
    female = "Female"
