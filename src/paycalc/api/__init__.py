"""HTTP front end for PayCalc."""
