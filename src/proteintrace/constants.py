"""Fixed values of the PDB atom record format."""

# Record keywords that carry atom positions
ATOM_RECORD = "ATOM"
HETATM_RECORD = "HETATM"
ATOM_RECORD_KEYWORDS = (ATOM_RECORD, HETATM_RECORD)

# Atom name of the alpha carbon, one per residue
BACKBONE_MARKER = "CA"

# 1-indexed inclusive PDB columns converted to Python slices
SERIAL_COLUMNS = slice(6, 11)
ATOM_NAME_COLUMNS = slice(12, 16)
RESIDUE_NAME_COLUMNS = slice(17, 20)
CHAIN_ID_COLUMNS = slice(21, 22)
RESIDUE_SEQUENCE_COLUMNS = slice(22, 26)
X_COLUMNS = slice(30, 38)
Y_COLUMNS = slice(38, 46)
Z_COLUMNS = slice(46, 54)
ELEMENT_COLUMNS = slice(76, 78)
