"""Tests for the teacher and student homework lists."""

from homeboard.homework.views import student_view, teacher_view


def _ids(items):
    return [hw.id for hw in items]


class TestTeacherView:
    def test_no_filters_sorted_by_due(self, sample_homeworks):
        assert _ids(teacher_view(sample_homeworks)) == ["h3", "h4", "h2", "h5", "h1"]

    def test_subject_filter(self, sample_homeworks):
        assert _ids(teacher_view(sample_homeworks, subject="Math")) == ["h3", "h1"]

    def test_class_filter(self, sample_homeworks):
        assert _ids(teacher_view(sample_homeworks, class_level="5A")) == ["h4", "h5", "h1"]

    def test_subject_and_class(self, sample_homeworks):
        assert _ids(teacher_view(sample_homeworks, subject="Math", class_level="7B")) == ["h3"]

    def test_empty_filters_ignored(self, sample_homeworks):
        assert len(teacher_view(sample_homeworks, subject="", class_level=None, query="  ")) == 5

    def test_query_matches_title(self, sample_homeworks):
        assert _ids(teacher_view(sample_homeworks, query="POEM")) == ["h2"]

    def test_query_matches_description(self, sample_homeworks):
        assert _ids(teacher_view(sample_homeworks, query="charcoal")) == ["h4"]

    def test_query_matches_subject_and_class(self, sample_homeworks):
        assert _ids(teacher_view(sample_homeworks, query="biol")) == ["h5"]
        assert _ids(teacher_view(sample_homeworks, query="7b")) == ["h3", "h2"]

    def test_query_surrounding_spaces_are_kept(self, sample_homeworks):
        assert _ids(teacher_view(sample_homeworks, query="life ")) == ["h4"]
        assert teacher_view(sample_homeworks, query="worksheet ") == []
        assert teacher_view(sample_homeworks, query=" charcoal") == [sample_homeworks[3]]

    def test_no_match(self, sample_homeworks):
        assert teacher_view(sample_homeworks, query="zzz") == []

    def test_does_not_mutate_input(self, sample_homeworks):
        before = list(sample_homeworks)
        teacher_view(sample_homeworks)
        assert sample_homeworks == before


class TestStudentView:
    def test_class_only_sorted(self, sample_homeworks):
        result = student_view(sample_homeworks, {}, class_level="5A", student_name="Ana")
        assert _ids(result) == ["h4", "h5", "h1"]

    def test_completed_shown_by_default(self, sample_homeworks):
        progress = {"Ana": {"h4": True}}
        result = student_view(sample_homeworks, progress, "5A", "Ana")
        assert "h4" in _ids(result)

    def test_hide_completed(self, sample_homeworks):
        progress = {"Ana": {"h4": True, "h5": False}}
        result = student_view(sample_homeworks, progress, "5A", "Ana", hide_completed=True)
        assert _ids(result) == ["h5", "h1"]

    def test_other_students_progress_ignored(self, sample_homeworks):
        progress = {"Ben": {"h4": True}}
        result = student_view(sample_homeworks, progress, "5A", "Ana", hide_completed=True)
        assert _ids(result) == ["h4", "h5", "h1"]

    def test_unknown_class(self, sample_homeworks):
        assert student_view(sample_homeworks, {}, "10B", "Ana") == []
