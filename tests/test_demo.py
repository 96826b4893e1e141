import io

from polynum.demo import main, run, sample_numbers, sort_numbers


def _output() -> str:
    buffer = io.StringIO()
    run(buffer)
    return buffer.getvalue()


def test_sample_numbers_strings():
    assert [str(n) for n in sample_numbers()] == [
        "Value of int:10",
        "Value of double:10.1",
        "Value of int:7",
        "Value of double:2.71",
        "Value of float:2.71",
        "Value of Complex:2+0j",
        "Value of Complex:3+2j",
        "Value of Complex:3-2j",
    ]


def test_sort_is_permutation_and_does_not_mutate():
    numbers = sample_numbers()
    before = list(numbers)
    result = sort_numbers(numbers)
    assert numbers == before or all(a is b for a, b in zip(numbers, before))
    assert sorted(map(id, result)) == sorted(map(id, numbers))
    assert len(result) == len(numbers)


def test_sort_no_element_greater_than_later():
    result = sort_numbers(sample_numbers())
    for i, left in enumerate(result):
        assert not any(left > right for right in result[i + 1:])


def test_sort_empty_list():
    assert sort_numbers([]) == []


def test_run_starts_with_equality_line():
    assert _output().startswith(
        "Value of double:2.71\n equals Value of float:2.71\n"
    )


def test_run_skips_false_comparisons():
    assert "Value of float:2.71\n more than" not in _output()


def test_run_reports_true_comparisons():
    text = _output()
    assert "Value of Complex:3+2j\n more than Value of Complex:2+0j\n" in text
    assert "Value of int:7\n more than Value of Complex:2+0j\n" in text
    assert "Value of int:10\n more than Value of Complex:3-2j\n" in text
    assert "Value of double:10.1\n more than Value of double:2.71\n" in text


def test_run_sections_in_order():
    text = _output()
    finish = text.index("Finish\n")
    initial = text.index("Initial numbers:\n")
    sorted_at = text.index("Sorted array:\n")
    assert finish < initial < sorted_at


def test_run_prints_sum_before_sorted_section():
    text = _output()
    sum_line = text.index("Value of int:5\n", text.index("Initial numbers:\n"))
    assert sum_line < text.index("Sorted array:\n")


def test_run_lists_each_number_with_blank_line():
    text = _output()
    initial = text[text.index("Initial numbers:\n"):]
    for number in sample_numbers():
        assert f"{number}\n\n" in initial


def test_main_writes_to_stdout(capsys):
    assert main() == 0
    assert capsys.readouterr().out == _output()