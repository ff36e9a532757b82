"""Sample catalog and schedule data inserted on first boot."""

from portal.models.timetable import SlotVariant

BRANCHES = ["CSE", "ECE", "CSM"]
SECTIONS = ["A", "B", "C"]
SEMESTER_NUMBERS = list(range(1, 9))

SUBJECTS = [
    {"code": "23A31401T", "name": "Machine Learning", "faculty": "D. Masthan Pasha"},
    {"code": "23A37501T", "name": "Cloud Computing", "faculty": "K. Kishore Kumar"},
    {"code": "23A50601T", "name": "Cryptography & Network Security", "faculty": "Dr. M. Jaya Bhaskar"},
    {"code": "23A50602A", "name": "Software Testing Methodologies", "faculty": "P. Ram Prasad"},
    {"code": "23A50603A", "name": "Software Project Management", "faculty": "G. Parvathi"},
    {"code": "23A31601", "name": "Chemistry of Polymers and Applications", "faculty": "Dr. Z. Raveendra Babu"},
    {"code": "23A31401P", "name": "Machine Learning Lab", "faculty": "P. Ram Prasad"},
    {"code": "23A50601P", "name": "Cryptography & Network Security Lab", "faculty": "Dr. M. Jaya Bhaskar"},
    {"code": "23A52501", "name": "Soft Skills", "faculty": "T. Sanjeeva Prasad"},
    {"code": "23A52601", "name": "Technical Paper Writing & IPR", "faculty": "B. Soma Sekhara Reddy"},
    {"code": "CRT001", "name": "CRT - Aptitude", "faculty": "CRT Faculty"},
    {"code": "23A11101P", "name": "Engineering Physics/Engineering Workshop Lab", "faculty": "DR.P.Sreenivasula Reddy"},
    {"code": "23A11103T", "name": "Programming in C", "faculty": "Mr.G.Sreenivasulu"},
    {"code": "23A11102T", "name": "Basic Chemistry", "faculty": "dr.z.Ravindra Babu"},
    {"code": "23A11104P", "name": "Engineering Graphics Practice", "faculty": "Mr.B.Saroj kumar"},
    {"code": "23A11105T", "name": "Introduction to Web Technologies", "faculty": "Computer Science Faculty"},
    {"code": "23A11106T", "name": "Aptitude Skills", "faculty": "Training Faculty"},
    {"code": "23A11107T", "name": "Mathematics for Engineers", "faculty": "Mr.M.firoj ali baig"},
    {"code": "23A11108T", "name": "Engineering Graphics", "faculty": "Mr.B.saroj kumar"},
    {"code": "23A11109T", "name": "Linear algebra & calculus", "faculty": "Mr.M.firoj ali baig"},
    {"code": "23A11110T", "name": "Health and Wellness", "faculty": "Mrs.T.silpa"},
    {"code": "23A11111T", "name": "Engineering Physics", "faculty": "Dr.P.sreenivasulu"},
    {"code": "23A11112T", "name": "Yoga and Sports", "faculty": "Mr.M.ravi kumar"},
    {"code": "LIB001", "name": "Library Hour", "faculty": "Library Staff"},
    {"code": "23A11113P", "name": "C Programming Lab", "faculty": "Computer Science Faculty"},
    {"code": "23A11114T", "name": "Soft Skills", "faculty": "English Faculty"},
    {"code": "SPORTS001", "name": "Sports Activities", "faculty": "Physical Education Faculty"},
    {"code": "23A11115P", "name": "Electrical and Electronics Engineering Workshop", "faculty": "EEE Faculty"},
    {"code": "23A11116T", "name": "Basic Electrical and Electronics Engineering (ECE)", "faculty": "ECE Faculty"},
    {"code": "23A11117P", "name": "Information Technology/Chemistry Lab", "faculty": "IT/Chemistry Faculty"},
    {"code": "23A11118T", "name": "Chemistry", "faculty": "Chemistry Faculty"},
    {"code": "23A11119T", "name": "Basic Electrical and Electronics Engineering (EEE)", "faculty": "EEE Faculty"},
    {"code": "NSS001", "name": "National Service Scheme", "faculty": "NSS Coordinator"},
]

SLOT_TEMPLATES = {
    SlotVariant.default: [
        ("9:30-10:20 1", "9:30 am - 10:20 am"),
        ("10:20-11:10 2", "10:20 am - 11:10 am"),
        ("tea Break", "11:10 am - 11:30 am"),
        ("11:30 am - 12:20  3", "11:30 am - 12:20 pm"),
        ("12:20 pm - 1:10 pm 4", "12:20 pm - 1:10 pm"),
        ("Lunch Break", "1:10 pm - 2:00 pm"),
        ("2:00 pm - 2:50 pm 5", "2:00 pm - 2:50 pm"),
        ("2:50 pm - 3:40 pm 6", "2:50 pm - 3:40 pm"),
        ("3:40 pm - 4:30 pm 7", "3:40 pm - 4:30 pm"),
    ],
    SlotVariant.first_semester: [
        ("P1  9:30am-10:20am ", " 9:30 am - 10:20 am"),
        ("P2 10:20-11:10", "10:20 am - 11:10 am"),
        ("P3 11:10am-12:00pm", "11:10 am - 12:00 pm"),
        ("LUNCH BREAK ", "12:00 pm - 12:50 pm"),
        ("P4 12:50pm-1:40pm ", " 12:50pm-1:40pm"),
        ("P5 1:40 pm - 2:30 pm ", "1:40 pm - 2:30 pm"),
        ("tea Break", "2:30pm-2:50pm"),
        ("P6 2:50 pm - 3:40 pm ", "2:50 pm - 3:40 pm"),
        ("P7 3:40 pm - 4:30 pm ", "3:40 pm - 4:30 pm"),
    ],
}

# Cells authored with these hints are break/lunch periods and carry no subject.
BREAK_HINTS = frozenset({"Break", "Lunch", "tea Break"})

# Short hints used in the authored timetables, mapped to subject codes.
SUBJECT_ALIASES = {
    "ML": "23A31401T",
    "ML Lab": "23A31401P",
    "STM": "23A50602A",
    "CPA": "23A31601",
    "CNS": "23A50601T",
    "CNS-LAB2": "23A50601P",
    "CC": "23A37501T",
    "SPM": "23A50603A",
    "TPW": "23A52601",
    "CRT-APT": "CRT001",
    "CRT-SS": "23A52501",
    "SOFT-SKILLS LAB": "23A52501",
    "SPORTS": "SPORTS001",
    "LIB": "LIB001",
}

SAMPLE_TIMETABLES = [
    {
        "branch": "CSE",
        "semester": 6,
        "section": "A",
        "week": {
            "Monday": ["ML", "STM", "Break", "CPA", "CNS", "Lunch", "CC", "ML Lab", "ML Lab"],
            "Tuesday": ["CPA", "CNS", "Break", "ML", "STM", "Lunch", "CC", "CRT-SS", "CC"],
            "Wednesday": ["CRT-APT", "TPW", "Break", "CPA", "SPM", "Lunch", "STM", "SOFT-SKILLS LAB", "SOFT-SKILLS LAB"],
            "Thursday": ["STM", "SPM", "Break", "CNS-LAB2", "CNS-LAB2", "Lunch", "SPM", "CRT-APT", "CC"],
            "Friday": ["ML", "STM", "Break", "SPM", "CNS", "Lunch", "SPM", "CNS", "SPORTS"],
            "Saturday": ["CNS", "CC", "Break", "ML", "CPA", "Lunch", "ML", "CPA", "LIB"],
        },
    },
]

SAMPLE_PAPERS = {
    "CSE": [
        {"title": "Data Structures", "year": 2022, "semester": 3},
        {"title": "Algorithms", "year": 2022, "semester": 3},
        {"title": "Database Management Systems", "year": 2022, "semester": 4},
        {"title": "Operating Systems", "year": 2022, "semester": 4},
        {"title": "Computer Networks", "year": 2021, "semester": 5},
        {"title": "Theory of Computation", "year": 2021, "semester": 5},
        {"title": "Machine Learning", "year": 2021, "semester": 6},
        {"title": "Cloud Computing", "year": 2021, "semester": 6},
        {"title": "Software Engineering", "year": 2020, "semester": 7},
        {"title": "Web Technologies", "year": 2020, "semester": 7},
    ],
}

SAMPLE_SYLLABI = [
    {
        "branch": "CSE",
        "semester": 1,
        "title": "CSE - Semester 1 Syllabus",
        "sections": [
            {
                "title": "Mathematics I",
                "topics": ["Calculus and Linear Algebra", "Differential Equations", "Vector Calculus"],
            },
            {
                "title": "Engineering Physics",
                "topics": ["Mechanics", "Optics", "Thermodynamics"],
            },
            {
                "title": "Basic Electrical Engineering",
                "topics": ["DC Circuits", "AC Circuits", "Electrical Machines"],
            },
        ],
    },
]
