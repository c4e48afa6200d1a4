"""Bubble, selection and merge sort cases that are stepped and drawn frame by frame."""