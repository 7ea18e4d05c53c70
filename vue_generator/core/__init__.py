"""Script section generators and assembler."""
