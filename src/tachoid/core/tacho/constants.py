"""Tachograph driver card file identifiers and record positions."""

# Application DFs
TACHOGRAPH_DF = bytes.fromhex("FF544143484F")  # "\xFFTACHO"
TACHOGRAPH_GEN2_DF = bytes.fromhex("FF534D524454")  # "\xFFSMRDT"

DF_BY_GENERATION: dict[int, bytes] = {
    1: TACHOGRAPH_DF,
    2: TACHOGRAPH_GEN2_DF,
}

# EF Identification under the application DF
IDENTIFICATION_EF = bytes.fromhex("0520")

# Records inside EF Identification
CARD_IDENTIFICATION_OFFSET = 0x00
CARD_IDENTIFICATION_LENGTH = 0x41
DRIVER_CARD_HOLDER_IDENTIFICATION_OFFSET = 0x41
DRIVER_CARD_HOLDER_IDENTIFICATION_LENGTH = 0x4E
