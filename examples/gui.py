# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox

import random

from cg2d.hull import ConvexHull2D
from cg2d.io import parse_points

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg


def generate_random_points(n: int):
    """
    Генерує n випадкових точок у квадраті [0,1]^2.
    """
    return [(random.random(), random.random()) for _ in range(n)]


class HullApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Quickhull 2D")
        self.geometry("800x650")

        self.fig = None
        self.ax = None
        self.canvas = None

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Режим вводу ---
        mode_frame = ttk.LabelFrame(main, text="Режим вводу точок")
        mode_frame.pack(fill="x", pady=5)

        self.input_mode = tk.StringVar(value="random")
        ttk.Radiobutton(
            mode_frame, text="Випадкові точки в квадраті", variable=self.input_mode,
            value="random", command=self._update_mode_state,
        ).grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Radiobutton(
            mode_frame, text="Ручне введення точок", variable=self.input_mode,
            value="manual", command=self._update_mode_state,
        ).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(mode_frame, text="Кількість випадкових точок:").grid(
            row=1, column=0, sticky="w", padx=5, pady=5
        )
        self.n_entry = ttk.Entry(mode_frame, width=10)
        self.n_entry.insert(0, "50")
        self.n_entry.grid(row=1, column=1, sticky="w", padx=5, pady=5)

        # --- Поле для ручного вводу ---
        manual_frame = ttk.LabelFrame(main, text="Ручне введення точок (одна точка - один рядок)")
        manual_frame.pack(fill="x", pady=5)

        self.points_text = tk.Text(manual_frame, height=6, wrap="none")
        self.points_text.pack(fill="both", expand=True, padx=5, pady=5)
        self.points_text.insert("1.0", "# Приклад:\n0 0\n4 0\n4 4\n0 4\n2 2\n")

        ttk.Button(main, text="Побудувати оболонку", command=self.run_hull).pack(fill="x", pady=10)

        # --- Результати ---
        result_frame = ttk.LabelFrame(main, text="Результати")
        result_frame.pack(fill="x", pady=5)

        self.points_var = tk.StringVar(value="—")
        self.vertices_var = tk.StringVar(value="—")
        self.area_var = tk.StringVar(value="—")
        self.valid_var = tk.StringVar(value="—")
        rows = [("Точок:", self.points_var), ("Вершин оболонки:", self.vertices_var),
                ("Площа:", self.area_var), ("Валідація:", self.valid_var)]
        for r, (text, var) in enumerate(rows):
            ttk.Label(result_frame, text=text).grid(row=r, column=0, sticky="w", padx=5, pady=2)
            ttk.Label(result_frame, textvariable=var).grid(row=r, column=1, sticky="w", padx=5, pady=2)

        # --- Графік ---
        plot_frame = ttk.LabelFrame(main, text="Візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(4, 3))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

        self._update_mode_state()

    def _update_mode_state(self):
        state = "normal" if self.input_mode.get() == "random" else "disabled"
        self.n_entry.configure(state=state)

    def update_plot(self, hull: ConvexHull2D):
        self.ax.clear()
        self.ax.scatter([p.x for p in hull.P], [p.y for p in hull.P], s=8)

        ring = hull.boundary()
        if ring:
            closed = ring + ring[:1]
            self.ax.plot([p.x for p in closed], [p.y for p in closed], linewidth=1.0)
        self.ax.set_aspect("equal", adjustable="datalim")
        self.ax.set_xlabel("X")
        self.ax.set_ylabel("Y")
        self.ax.set_title("Convex hull")
        self.canvas.draw()

    def run_hull(self):
        if self.input_mode.get() == "random":
            try:
                n = int(self.n_entry.get())
                if n < 0:
                    raise ValueError
            except ValueError:
                messagebox.showerror("Помилка", "Кількість точок має бути невід’ємним цілим числом.")
                return
            points = generate_random_points(n)
        else:
            try:
                points = parse_points(self.points_text.get("1.0", "end"))
            except ValueError as e:
                messagebox.showerror("Помилка парсингу точок", str(e))
                return

        try:
            hull = ConvexHull2D(points)
        except ValueError as e:
            messagebox.showerror("Помилка виконання", str(e))
            return

        report = hull.validate()
        self.update_plot(hull)
        self.points_var.set(str(len(hull.P)))
        self.vertices_var.set(str(len(hull)))
        self.area_var.set(f"{hull.area():.4f}")
        if report["bad_turns"] or report["outside_points"]:
            self.valid_var.set("Є проблеми (див. консоль)")
        else:
            self.valid_var.set("OK")
        print("VALIDATION:", report)


if __name__ == "__main__":
    app = HullApp()
    app.mainloop()
