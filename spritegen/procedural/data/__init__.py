# Our data: palette tables
