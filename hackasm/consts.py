"""Constants of the Hack platform the assembler targets."""

# Width of an single instruction word (in bits)
INSTRUCTION_WORD_WIDTH = 16

# Largest value an address instruction may load (15 bits, bit 15 is always zero)
MAX_ADDRESS_LITERAL = 0b0111_1111_1111_1111

# Variables are allocated in data memory right after the general purpose registers
VARIABLE_BASE_ADDRESS = 16
VARIABLE_ADDRESS_LIMIT = 16383

# Memory-mapped I/O
SCREEN_ADDRESS = 16384
KEYBOARD_ADDRESS = 24576

GENERAL_PURPOSE_REGISTERS_COUNT = 16

SOURCE_FILE_SUFFIX = ".asm"
OUTPUT_FILE_SUFFIX = ".hack"
