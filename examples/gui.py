# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox

from cg2d.geom import Pt, unique_points
from cg2d.points import DISTRIBUTIONS, gen_points, normalize_seed
from cg2d.pipeline import compare_hulls, compute_hulls
from cg2d.steps import graham_with_steps, jarvis_with_steps
from cg2d import config

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg


def parse_points_from_text(text: str):
    """
    Парсить точки з багаторядкового тексту.
    Кожен рядок: x y або x, y.
    Повертає список (x,y) як float.
    """
    points = []
    lines = text.splitlines()
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue  # пропускаємо пусті строки і коментарі
        line = line.replace(",", " ")
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"Рядок {lineno}: очікується 2 числа, отримано: {len(parts)}")
        try:
            x, y = map(float, parts)
        except ValueError:
            raise ValueError(f"Рядок {lineno}: не вдалось прочитати числа '{line}'")
        points.append((x, y))
    if not points:
        raise ValueError("Потрібна хоча б одна точка.")
    return points


def closed(poly):
    """Список Pt -> (xs, ys) із замиканням на першу вершину."""
    if not poly:
        return [], []
    ring = list(poly) + [poly[0]]
    return [p.x for p in ring], [p.y for p in ring]


class HullApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Convex Hull 2D — Jarvis vs Graham")
        self.geometry("900x760")

        self.fig = None
        self.ax = None
        self.canvas = None

        # стан Teach Mode
        self.points = []
        self.steps = []
        self.step_idx = 0

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Режим вводу ---
        mode_frame = ttk.LabelFrame(main, text="Режим вводу точок")
        mode_frame.pack(fill="x", pady=5)

        self.input_mode = tk.StringVar(value="random")
        ttk.Radiobutton(
            mode_frame, text="Згенеровані точки", variable=self.input_mode,
            value="random", command=self._update_mode_state,
        ).grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Radiobutton(
            mode_frame, text="Ручне введення точок", variable=self.input_mode,
            value="manual", command=self._update_mode_state,
        ).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        # --- Параметри генерації ---
        input_frame = ttk.LabelFrame(main, text="Параметри генерації")
        input_frame.pack(fill="x", pady=5)

        ttk.Label(input_frame, text="N:").grid(row=0, column=0, sticky="w", padx=5, pady=5)
        self.n_entry = ttk.Entry(input_frame, width=10)
        self.n_entry.insert(0, "200")
        self.n_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)

        ttk.Label(input_frame, text="Seed:").grid(row=0, column=2, sticky="w", padx=5, pady=5)
        self.seed_entry = ttk.Entry(input_frame, width=10)
        self.seed_entry.grid(row=0, column=3, sticky="w", padx=5, pady=5)

        ttk.Label(input_frame, text="Розподіл:").grid(row=0, column=4, sticky="w", padx=5, pady=5)
        self.dist_var = tk.StringVar(value="square")
        ttk.Combobox(input_frame, textvariable=self.dist_var, values=DISTRIBUTIONS,
                     state="readonly", width=10).grid(row=0, column=5, sticky="w", padx=5, pady=5)

        # --- Поле для ручного вводу ---
        manual_frame = ttk.LabelFrame(main, text="Ручне введення точок (одна точка - один рядок)")
        manual_frame.pack(fill="x", pady=5)
        self.points_text = tk.Text(manual_frame, height=4, wrap="none")
        self.points_text.pack(fill="x", padx=5, pady=5)
        self.points_text.insert("1.0", "# Приклад:\n0 0\n1 0\n1 1\n0 1\n0.5 0.5\n")

        # --- Кнопки ---
        btns = ttk.Frame(main)
        btns.pack(fill="x", pady=5)
        ttk.Button(btns, text="Побудувати оболонки", command=self.run_hulls).pack(side="left", padx=5)
        self.algo_var = tk.StringVar(value="graham")
        ttk.Combobox(btns, textvariable=self.algo_var, values=("jarvis", "graham"),
                     state="readonly", width=8).pack(side="left", padx=5)
        ttk.Button(btns, text="Teach Mode: старт", command=self.start_teach).pack(side="left", padx=5)
        ttk.Button(btns, text="Крок →", command=self.next_step).pack(side="left", padx=5)

        # --- Результати ---
        result_frame = ttk.LabelFrame(main, text="Результати")
        result_frame.pack(fill="x", pady=5)
        self.result_var = tk.StringVar(value="—")
        ttk.Label(result_frame, textvariable=self.result_var, justify="left").pack(fill="x", padx=5, pady=2)
        self.step_var = tk.StringVar(value="")
        ttk.Label(result_frame, textvariable=self.step_var, foreground="gray").pack(fill="x", padx=5, pady=2)

        # --- Графік ---
        plot_frame = ttk.LabelFrame(main, text="2D візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)
        self.fig = Figure(figsize=(5, 4))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

        self._update_mode_state()

    def _update_mode_state(self):
        state = "normal" if self.input_mode.get() == "random" else "disabled"
        self.n_entry.configure(state=state)
        self.seed_entry.configure(state=state)

    def _collect_points(self):
        if self.input_mode.get() == "random":
            try:
                n = int(self.n_entry.get())
                if n < 0:
                    raise ValueError
            except ValueError:
                messagebox.showerror("Помилка", "Кількість точок має бути невід’ємним цілим числом.")
                return None
            n = min(n, config.MAX_POINTS)
            seed = normalize_seed(self.seed_entry.get().strip() or None, n)
            return gen_points(n, seed, self.dist_var.get())
        raw_text = self.points_text.get("1.0", "end").strip()
        try:
            return unique_points(parse_points_from_text(raw_text))
        except ValueError as e:
            messagebox.showerror("Помилка парсингу точок", str(e))
            return None

    def _draw_base(self, title):
        self.ax.clear()
        if self.points:
            self.ax.scatter([p.x for p in self.points], [p.y for p in self.points], s=4, color="gray")
        self.ax.set_aspect("equal", adjustable="datalim")
        self.ax.set_title(title)

    def run_hulls(self):
        pts = self._collect_points()
        if pts is None:
            return
        self.points = pts
        self.steps = []

        res = compute_hulls(pts)
        j = [Pt(**d) for d in res["jarvis"]["points"]]
        g = [Pt(**d) for d in res["graham"]["points"]]
        info = compare_hulls(pts, j, g)

        self._draw_base(f"N = {len(pts)}")
        xs, ys = closed(j)
        self.ax.plot(xs, ys, color="tab:orange", linewidth=2, label="Jarvis")
        xs, ys = closed(g)
        self.ax.plot(xs, ys, color="tab:blue", linestyle="--", linewidth=1, label="Graham")
        self.ax.legend(loc="upper right")
        self.canvas.draw()

        self.result_var.set(
            f"Jarvis: {info['jarvis_size']} вершин, {res['jarvis']['ms']:.2f} мс, "
            f"площа {info['jarvis_area']:.2f}, периметр {info['jarvis_perimeter']:.2f}\n"
            f"Graham: {info['graham_size']} вершин, {res['graham']['ms']:.2f} мс, "
            f"площа {info['graham_area']:.2f}, периметр {info['graham_perimeter']:.2f}\n"
            f"Опуклість (площа / bbox): {info['convexity']:.3f}   "
            f"Збіг: {'OK' if info['ok'] else 'відрізняються'}"
        )

    def start_teach(self):
        pts = self._collect_points()
        if pts is None:
            return
        self.points = pts
        if self.algo_var.get() == "jarvis":
            _, trace = jarvis_with_steps(pts)
        else:
            _, trace = graham_with_steps(pts)
        self.steps = list(trace)
        self.step_idx = 0
        self._draw_base(f"Teach Mode: {self.algo_var.get()} ({len(self.steps)} кроків)")
        self.canvas.draw()
        self.step_var.set("Натисніть «Крок →»")

    def next_step(self):
        if self.step_idx >= len(self.steps):
            self.step_var.set("Кроки закінчились.")
            return
        s = self.steps[self.step_idx]
        if s.type == "start":
            self.ax.plot([s.at.x], [s.at.y], "o", color="tab:green")
        elif s.type == "edge":
            self.ax.plot([s.src.x, s.dst.x], [s.src.y, s.dst.y], color="tab:orange", linewidth=2)
        elif s.type == "push":
            color = "tab:blue" if s.which == "lower" else "tab:purple"
            self.ax.plot([s.point.x], [s.point.y], "o", color=color, markersize=4)
        elif s.type == "pop":
            self.ax.plot([s.point.x], [s.point.y], "x", color="tab:red")
        self.canvas.draw()
        self.step_var.set(f"{self.step_idx + 1}/{len(self.steps)} {s.type}: {s.note}")
        self.step_idx += 1


if __name__ == "__main__":
    app = HullApp()
    app.mainloop()
