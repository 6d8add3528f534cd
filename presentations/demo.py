# Demo deck. Run with:  python run_presentation.py presentations/demo.py
# Edit and save this file while presenting; the slides reload on the next key.

section("termdeck")

center(f"""
    Slides in your terminal

    {italic("live-reloaded")} from a plain Python file
    """)

block("""
    Keys
      space n l k PgDn   next slide
      b p h j PgUp       previous slide
      ^ / $              first / last slide
      q                  quit
    """)

section("Code")

code("""
    def center_offset(axis_size, content_size):
        return max(1, 1 + (axis_size - content_size) // 2)
    """, "python")

center(f"""
    {bold("Thanks!")}
    """)
