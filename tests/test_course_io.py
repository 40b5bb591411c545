"""
Unit tests for course record files.

File contract:
- one record per line, 6 fields (Arranged) or 8 fields (timed)
- malformed records and duplicate name + section records are skipped
- a missing file raises OSError
- writing produces one record line per course
"""

import tempfile
import unittest
from pathlib import Path

from wolfscheduler.course_io import parse_course_record, read_course_records, write_course_records
from wolfscheduler.model import Course


RECORDS = """\
CSC 116,Intro to Programming - Java,001,3,jdyoung2,MW,910,1100
CSC 116,Intro to Programming - Java,002,3,spbalik,MW,1120,1310
CSC 216,Software Development Fundamentals,001,3,sesmith5,TH,1330,1445

CSC 216,Software Development Fundamentals,601,3,jctetter,A
CSC 116,Intro to Programming - Java,001,3,somebody,TH,800,915
CSC216,Missing Space,001,3,x,MW,910,1100
CSC 226,Discrete Mathematics,001,three,tmbarnes,MWF,935,1025
CSC 230,C and Software Tools,001,3,dbsturgi,MW,1145
CSC 217,Software Development Fundamentals Lab,601,1,sesmith5,A,0,0
CSC 226,Discrete Mathematics,001,3,tmbarnes,MWF,935,1025
"""


class TestParseCourseRecord(unittest.TestCase):
    def test_timed_record(self) -> None:
        c = parse_course_record("CSC 116,Intro to Programming - Java,001,3,jdyoung2,MW,910,1100")
        self.assertEqual(c, Course("CSC 116", "Intro to Programming - Java", "001", 3, "jdyoung2", "MW", 910, 1100))

    def test_arranged_record(self) -> None:
        c = parse_course_record("CSC 216,Software Development Fundamentals,601,3,jctetter,A")
        self.assertTrue(c.is_arranged)
        self.assertEqual(c.start_time, 0)

    def test_malformed_records_raise_value_error(self) -> None:
        bad = [
            "CSC 116,Intro,001,3",
            "CSC 116,Intro,001,x,jdyoung2,MW,910,1100",
            "CSC 116,Intro,001,3,jdyoung2,MW,910",
            "CSC 116,Intro,001,3,jdyoung2,MW,910,1100,extra",
            "CSC 216,Software,601,3,jctetter,A,0,0",
            "CSC 116,Intro,001,9,jdyoung2,MW,910,1100",
        ]
        for line in bad:
            with self.subTest(line=line):
                with self.assertRaises(ValueError):
                    parse_course_record(line)


class TestReadCourseRecords(unittest.TestCase):
    def test_skips_invalid_and_duplicate_records(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "courses.txt"
            p.write_text(RECORDS, encoding="utf-8")
            courses = read_course_records(p)

        keys = [(c.name, c.section) for c in courses]
        self.assertEqual(
            keys,
            [
                ("CSC 116", "001"),
                ("CSC 116", "002"),
                ("CSC 216", "001"),
                ("CSC 216", "601"),
                ("CSC 226", "001"),
            ],
        )
        # first record of a duplicated offering wins
        self.assertEqual(courses[0].instructor_id, "jdyoung2")

    def test_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(OSError):
                read_course_records(Path(d) / "missing.txt")

    def test_empty_file_gives_empty_list(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "empty.txt"
            p.write_text("", encoding="utf-8")
            self.assertEqual(read_course_records(p), [])


class TestWriteCourseRecords(unittest.TestCase):
    def test_write_then_read(self) -> None:
        courses = [
            Course("CSC 116", "Intro to Programming - Java", "001", 3, "jdyoung2", "MW", 910, 1100),
            Course("CSC 216", "Software Development Fundamentals", "601", 3, "jctetter", "A"),
        ]
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "out" / "schedule.txt"
            write_course_records(p, courses)
            text = p.read_text(encoding="utf-8")
            self.assertEqual(
                text,
                "CSC 116,Intro to Programming - Java,001,3,jdyoung2,MW,910,1100\n"
                "CSC 216,Software Development Fundamentals,601,3,jctetter,A\n",
            )
            self.assertEqual(read_course_records(p), courses)

    def test_write_empty_schedule(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "schedule.txt"
            write_course_records(p, [])
            self.assertEqual(p.read_text(encoding="utf-8"), "")

    def test_unwritable_destination_raises(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            # a directory cannot be written as a file
            with self.assertRaises(OSError):
                write_course_records(Path(d), [])


if __name__ == "__main__":
    unittest.main()
