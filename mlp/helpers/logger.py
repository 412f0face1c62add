# mlp/helpers/logger.py
import csv, json, datetime, pathlib
import matplotlib.pyplot as plt


class RunLogger:
    """
    Records one Network.train run under runs/<tag>_<timestamp>/:
      config.json   architecture and hyperparameters of the run
      history.csv   epoch,loss - appended as training goes
      history.json  config, final loss and the full loss history
    """
    def __init__(self, root="runs", tag="run"):
        ts = datetime.datetime.now().strftime("%Y%m%d-%H%M%S")
        self.tag = tag
        self.dir = pathlib.Path(root) / f"{tag}_{ts}"
        self.dir.mkdir(parents=True, exist_ok=True)
        self.config_path = self.dir / "config.json"
        self.csv_path = self.dir / "history.csv"
        self.json_path = self.dir / "history.json"
        self.config = {}
        self.losses = []

    def log_config(self, **config):
        self.config = dict(config)
        with open(self.config_path, "w") as f:
            json.dump(self.config, f, indent=2)

    def log_epoch(self, epoch, loss):
        first = not self.losses
        self.losses.append(float(loss))
        with open(self.csv_path, "w" if first else "a", newline="") as f:
            writer = csv.writer(f)
            if first:
                writer.writerow(["epoch", "loss"])
            writer.writerow([int(epoch), repr(float(loss))])

    def save_json(self):
        summary = {
            "tag": self.tag,
            "config": self.config,
            "epochs_run": len(self.losses),
            "final_loss": self.losses[-1] if self.losses else None,
            "loss": self.losses,
        }
        with open(self.json_path, "w") as f:
            json.dump(summary, f, indent=2)
        return str(self.json_path)

    def plot_loss(self, history=None, subdir="plots"):
        """
        Saves the training loss curve as loss_curve_<tag>_epochs_<n>.png.
        Uses the logged losses unless a Network.train history is given.
        """
        losses = history.get("loss", []) if history is not None else self.losses
        total_epochs = len(losses)

        outdir = self.dir / subdir
        outdir.mkdir(parents=True, exist_ok=True)
        path = outdir / f"loss_curve_{self.tag}_epochs_{total_epochs}.png"
        plt.figure()
        if total_epochs > 0:
            plt.plot(range(1, total_epochs + 1), losses, label="train loss")
            plt.legend()
        plt.xlabel("Epoch")
        plt.ylabel("Mean Squared Error")
        plt.title(f"Loss vs Epochs ({self.tag})")
        plt.tight_layout()
        plt.savefig(path, dpi=160)
        plt.close()
        return str(path)
