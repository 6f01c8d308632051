"""Tests for Record and Topic."""

from topicscrape.data_types import Record, Topic


class TestRecord:
    """Tests for Record."""

    def test_defaults_are_empty(self):
        """Every field shall default to an empty string."""
        record = Record()

        assert (
            record.username,
            record.role,
            record.text,
            record.datetime,
            record.data_id,
        ) == ("", "", "", "", "")

    def test_model_dump_omits_empty_data_id(self):
        """model_dump shall leave out an empty data_id."""
        assert "data_id" not in Record(username="u").model_dump()
        assert Record(data_id="7").model_dump()["data_id"] == "7"

    def test_csv_row(self):
        """csv_row shall list the CSV columns in header order."""
        record = Record(
            username="u", role="r", text="t", datetime="d", data_id="i"
        )

        assert record.csv_row() == ["u", "r", "t", "d"]


class TestTopic:
    """Tests for Topic."""

    def test_records_order(self):
        """records() shall list question, linked questions, then comments."""
        topic = Topic(
            question=Record(username="q"),
            linked_questions=[Record(username="l1"), Record(username="l2")],
            comments=[Record(username="c1")],
        )

        assert [r.username for r in topic.records()] == ["q", "l1", "l2", "c1"]

    def test_fresh_topics_do_not_share_lists(self):
        """Each Topic shall own its lists."""
        first = Topic()
        first.comments.append(Record(username="x"))

        assert Topic().comments == []
