from pathlib import Path

import pytest

from hackasm.assembler import (
    AssemblerStage,
    AssemblerState,
    assemble_file,
    assemble_from_lines,
    run_first_pass,
    run_second_pass,
)
from hackasm.codegen.encoder import decode_compute_instruction, format_instruction_word
from hackasm.codegen.errors import InvalidMnemonicError
from hackasm.io import SourceFileReadError, read_source_file_lines
from hackasm.parser.errors import InvalidSyntaxError
from hackasm.symbols.errors import AddressSpaceExhaustedError, SymbolExistsError

ADD_SOURCE = """\
// Computes R0 = 2 + 3  (R0 refers to RAM[0])

@2
D=A
@3
D=D+A
@0
M=D
"""

ADD_EXPECTED = [
    "0000000000000010",
    "1110110000010000",
    "0000000000000011",
    "1110000010010000",
    "0000000000000000",
    "1110001100001000",
]

MAX_SOURCE = """\
// Computes R2 = max(R0, R1)

   @R0
   D=M              // D = first number
   @R1
   D=D-M            // D = first number - second number
   @OUTPUT_FIRST
   D;JGT            // if D>0 (first is greater) goto output_first
   @R1
   D=M              // D = second number
   @OUTPUT_D
   0;JMP            // goto output_d
(OUTPUT_FIRST)
   @R0
   D=M              // D = first number
(OUTPUT_D)
   @R2
   M=D              // M[2] = D (greatest number)
(INFINITE_LOOP)
   @INFINITE_LOOP
   0;JMP            // infinite loop
"""

MAX_EXPECTED = [
    "0000000000000000",
    "1111110000010000",
    "0000000000000001",
    "1111010011010000",
    "0000000000001010",
    "1110001100000001",
    "0000000000000001",
    "1111110000010000",
    "0000000000001100",
    "1110101010000111",
    "0000000000000000",
    "1111110000010000",
    "0000000000000010",
    "1110001100001000",
    "0000000000001110",
    "1110101010000111",
]


def _assemble(source: str) -> list[str]:
    return [format_instruction_word(w) for w in assemble_from_lines(source.splitlines())]


def test_assemble_add() -> None:
    assert _assemble(ADD_SOURCE) == ADD_EXPECTED


def test_assemble_max_with_labels() -> None:
    assert _assemble(MAX_SOURCE) == MAX_EXPECTED


def test_assemble_deterministic() -> None:
    assert _assemble(MAX_SOURCE) == _assemble(MAX_SOURCE)


def test_label_resolves_to_next_instruction() -> None:
    words = list(
        assemble_from_lines(
            [
                "@0",
                "D=A",
                "(LOOP)",
                "D=D+1",
                "M=D",
                "@LOOP",
                "0;JMP",
            ],
        ),
    )
    assert words[4] == 2


def test_label_used_before_definition() -> None:
    words = list(assemble_from_lines(["@END", "0;JMP", "(END)", "@END", "0;JMP"]))
    assert words[0] == 2
    assert words[2] == 2


def test_label_preferred_over_variable() -> None:
    words = list(
        assemble_from_lines(
            [
                "@target",  # referenced before label, must not become variable
                "0;JMP",
                "@counter",
                "M=0",
                "(target)",
                "@target",
                "0;JMP",
            ],
        ),
    )
    assert words[0] == 4
    assert words[2] == 16
    assert words[4] == 4


def test_variables_allocated_in_order() -> None:
    state = AssemblerState(lines=["@i", "M=1", "@sum", "M=0", "@i", "D=M", "@j", "@R15"])
    words = list(assemble_from_lines((), state=state))
    assert words == [16, words[1], 17, words[3], 16, words[5], 18, 15]
    assert state.symbols.variables() == {"i": 16, "sum": 17, "j": 18}


def test_empty_source() -> None:
    assert list(assemble_from_lines(["", "// nothing here", "   "])) == []


def test_labels_only_source() -> None:
    assert list(assemble_from_lines(["(A)", "(B)"])) == []


def test_stages() -> None:
    state = AssemblerState(lines=["(START)", "@START", "0;JMP"])
    assert state.stage == AssemblerStage.INITIAL

    run_first_pass(state)
    assert state.stage == AssemblerStage.PASS1_DONE
    assert state.symbols.get("START") == 0
    assert state.symbols.instruction_address == 2

    translator = run_second_pass(state)
    assert next(translator) == 0
    assert state.stage == AssemblerStage.PASS2_TRANSLATING
    assert list(translator) == [0b1110101010000111]
    assert state.stage == AssemblerStage.COMPLETE
    assert state.words_emitted == 2


def test_state_cannot_be_reused() -> None:
    state = AssemblerState(lines=["@1"])
    assert list(assemble_from_lines((), state=state)) == [1]
    with pytest.raises(AssertionError):
        list(assemble_from_lines((), state=state))


def test_first_pass_runs_before_first_word() -> None:
    # Syntax error at the end must be reported before any word is produced
    assembler = assemble_from_lines(["@1", "D=A", "foo bar"])
    with pytest.raises(InvalidSyntaxError):
        next(assembler)


def test_invalid_mnemonic_fails_in_second_pass() -> None:
    assembler = assemble_from_lines(["@1", "D=D+D"])
    assert next(assembler) == 1
    with pytest.raises(InvalidMnemonicError):
        next(assembler)


def test_duplicate_label() -> None:
    with pytest.raises(SymbolExistsError):
        list(assemble_from_lines(["(LOOP)", "@1", "(LOOP)"]))


def test_label_redefines_predefined() -> None:
    with pytest.raises(SymbolExistsError):
        list(assemble_from_lines(["(KBD)", "@1"]))


def test_variable_address_space_exhausted() -> None:
    capacity = 16383 - 16 + 1
    lines = [f"@v{i}" for i in range(capacity + 1)]
    assembler = assemble_from_lines(lines)
    for _ in range(capacity):
        next(assembler)
    with pytest.raises(AddressSpaceExhaustedError):
        next(assembler)


def test_compute_words_decode_back() -> None:
    source = ["AMD=D|M;JLE", "M=M+1", "D;JNE", "A=-1"]
    words = list(assemble_from_lines(source))
    assert [decode_compute_instruction(w) for w in words] == [
        ("AMD", "D|M", "JLE"),
        ("M", "M+1", "null"),
        ("null", "D", "JNE"),
        ("A", "-1", "null"),
    ]


def test_assemble_file(tmp_path: Path) -> None:
    source = tmp_path / "Max.asm"
    source.write_text(MAX_SOURCE)
    output = tmp_path / "Max.hack"

    state = assemble_file(source, output)

    assert output.read_text() == "\n".join(MAX_EXPECTED) + "\n"
    assert state.stage == AssemblerStage.COMPLETE
    assert state.words_emitted == len(MAX_EXPECTED)
    assert state.symbols.labels() == {
        "OUTPUT_FIRST": 10,
        "OUTPUT_D": 12,
        "INFINITE_LOOP": 14,
    }


def test_assemble_file_partial_output_on_error(tmp_path: Path) -> None:
    source = tmp_path / "Broken.asm"
    source.write_text("@2\nD=A\nD=Q\n@3\n")
    output = tmp_path / "Broken.hack"

    with pytest.raises(InvalidMnemonicError):
        assemble_file(source, output)
    assert output.read_text() == "0000000000000010\n1110110000010000\n"


def test_assemble_file_syntax_error_location(tmp_path: Path) -> None:
    source = tmp_path / "Broken.asm"
    source.write_text("@2\n\nfoo bar\n")

    with pytest.raises(InvalidSyntaxError) as e:
        assemble_file(source, tmp_path / "Broken.hack")
    assert "'Broken.asm:3'" in repr(e.value)


def test_assemble_file_missing_source(tmp_path: Path) -> None:
    with pytest.raises(SourceFileReadError):
        assemble_file(tmp_path / "Missing.asm", tmp_path / "Missing.hack")


def test_assemble_file_not_utf8_source(tmp_path: Path) -> None:
    source = tmp_path / "Latin.asm"
    source.write_bytes(b"// caf\xe9\n@1\n")

    with pytest.raises(SourceFileReadError) as e:
        assemble_file(source, tmp_path / "Latin.hack")
    assert "UTF-8" in repr(e.value)
    assert repr(e.value).endswith("[source-file-read-error]")


def test_assemble_file_line_numbers_ignore_form_feed(tmp_path: Path) -> None:
    source = tmp_path / "Paged.asm"
    source.write_bytes(b"@1 // page\x0cbreak\r\nD=A // group\x1csep\r\nfoo bar\r\n")

    with pytest.raises(InvalidSyntaxError) as e:
        assemble_file(source, tmp_path / "Paged.hack")
    assert "'Paged.asm:3'" in repr(e.value)


def test_read_source_file_lines(tmp_path: Path) -> None:
    source = tmp_path / "Lines.asm"
    source.write_bytes(b"@1\r\n\x0b\nM=D")
    assert read_source_file_lines(source) == ["@1", "\x0b", "M=D"]
